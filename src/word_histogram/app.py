import asyncio
from functools import partial

import streamlit as st

from word_histogram.chart import render, to_frame
from word_histogram.config import EXPORT_FILENAME, EXPORT_MIME, SOURCE_URL, TOP_N
from word_histogram.controller import HistogramController, State

st.set_page_config(page_title="Word Histogram", layout="wide")

st.title("📊 Word Histogram")
st.write(
    f"Click **Submit** to fetch `{SOURCE_URL}` and plot its {TOP_N} most frequent words."
)

if "controller" not in st.session_state:
    st.session_state["controller"] = HistogramController()
controller: HistogramController = st.session_state["controller"]

submit = st.button("Submit")
chart_area = st.empty()
controller.renderer = partial(render, chart_area)

loaded = False
if submit:
    with st.spinner("Fetching document …"):
        loaded = asyncio.run(controller.load())
if not loaded and controller.top_list is not None:
    render(chart_area, controller.top_list)

if controller.last_error is not None:
    st.error(f"Could not load the document: {controller.last_error.reason}")

if controller.can_export:
    st.download_button(
        "Export",
        data=controller.export_current(),
        file_name=EXPORT_FILENAME,
        mime=EXPORT_MIME,
    )
    with st.expander("Raw data"):
        st.dataframe(to_frame(controller.top_list), width="stretch")
elif controller.state is State.IDLE:
    st.info("Awaiting **Submit** button click.")
