from typing import Sequence, Tuple

import altair as alt
import pandas as pd


def to_frame(entries: Sequence[Tuple[str, int]]) -> pd.DataFrame:
    return pd.DataFrame(list(entries), columns=["word", "count"])


def build_chart(entries: Sequence[Tuple[str, int]]) -> alt.Chart:
    """Bar per word, in the order given, y axis from 0 to the top count."""
    df = to_frame(entries)
    max_count = int(df["count"].max()) if not df.empty else 0
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("word:N", sort=None, title="Word", axis=alt.Axis(labelAngle=-45)),
            y=alt.Y(
                "count:Q", title="Count", scale=alt.Scale(domain=[0, max_count])
            ),
            tooltip=["word", "count"],
        )
        .properties(height=400)
    )


def render(placeholder, entries: Sequence[Tuple[str, int]]) -> None:
    # placeholder is an st.empty(); drawing into it replaces the old chart
    if not entries:
        placeholder.info(
            "No words found in the document. Export will contain only the header row."
        )
        return
    placeholder.altair_chart(build_chart(entries), width="stretch")
