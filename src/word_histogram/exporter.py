from typing import Iterable, Tuple

HEADER = "Word,Count"


def to_csv(entries: Iterable[Tuple[str, int]]) -> str:
    """
    Render (word, count) pairs as spreadsheet-friendly text.

    Words are written verbatim: a word containing a comma would shift the
    columns. Tokenizer output never contains one.
    """
    lines = [HEADER]
    lines.extend(f"{word},{count}" for word, count in entries)
    return "\n".join(lines)
