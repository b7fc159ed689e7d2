"""Tests for the fetch -> count -> rank cycle and its state."""
import asyncio

from word_histogram.controller import HistogramController, State
from word_histogram.fetcher import RetrievalError

URL = "https://example.com/test.txt"
SAMPLE = "The cat sat on the mat. THE CAT ran."


def serving(text):
    calls = []

    async def fetch(url):
        calls.append(url)
        return text

    fetch.calls = calls
    return fetch


def failing(reason="boom"):
    async def fetch(url):
        raise RetrievalError(url, reason)

    return fetch


class TestInitialState:
    def test_starts_idle_without_export(self):
        controller = HistogramController(URL, fetcher=serving(SAMPLE))
        assert controller.state is State.IDLE
        assert controller.top_list is None
        assert controller.last_error is None
        assert not controller.can_export
        assert controller.export_current() is None


class TestLoad:
    def test_success_stores_top_list(self):
        fetch = serving(SAMPLE)
        controller = HistogramController(URL, fetcher=fetch)

        assert asyncio.run(controller.load()) is True
        assert fetch.calls == [URL]
        assert controller.state is State.READY
        assert controller.top_list[:2] == (("the", 3), ("cat", 2))
        assert controller.can_export
        assert controller.export_current().split("\n")[:2] == ["Word,Count", "the,3"]

    def test_explicit_source_overrides_default(self):
        fetch = serving(SAMPLE)
        controller = HistogramController(URL, fetcher=fetch)
        asyncio.run(controller.load("https://other.example/doc.txt"))
        assert fetch.calls == ["https://other.example/doc.txt"]

    def test_top_list_capped_at_top_n(self):
        text = " ".join(f"word{i}" for i in range(25))
        controller = HistogramController(URL, fetcher=serving(text))
        asyncio.run(controller.load())
        assert len(controller.top_list) == 20

    def test_top_n_is_configurable(self):
        controller = HistogramController(URL, fetcher=serving(SAMPLE), top_n=3)
        asyncio.run(controller.load())
        assert [e.word for e in controller.top_list] == ["the", "cat", "sat"]

    def test_empty_document(self):
        controller = HistogramController(URL, fetcher=serving(""))
        asyncio.run(controller.load())
        assert controller.state is State.READY
        assert controller.top_list == ()
        assert controller.export_current() == "Word,Count"

    def test_renderer_receives_new_top_list(self):
        rendered = []
        controller = HistogramController(
            URL, fetcher=serving(SAMPLE), renderer=rendered.append
        )
        asyncio.run(controller.load())
        assert rendered == [controller.top_list]

    def test_state_is_loading_while_fetching(self):
        seen = []

        async def fetch(url):
            seen.append(controller.state)
            return SAMPLE

        controller = HistogramController(URL, fetcher=fetch)
        asyncio.run(controller.load())
        assert seen == [State.LOADING]

    def test_next_load_replaces_top_list(self):
        controller = HistogramController(URL, fetcher=serving(SAMPLE))
        asyncio.run(controller.load())
        controller._fetcher = serving("dog dog")
        asyncio.run(controller.load())
        assert controller.top_list == (("dog", 2),)


class TestLoadFailure:
    def test_failure_from_idle_stays_idle(self):
        rendered = []
        controller = HistogramController(
            URL, fetcher=failing("404"), renderer=rendered.append
        )

        assert asyncio.run(controller.load()) is False
        assert controller.state is State.IDLE
        assert controller.top_list is None
        assert not controller.can_export
        assert controller.export_current() is None
        assert rendered == []
        assert isinstance(controller.last_error, RetrievalError)
        assert controller.last_error.reason == "404"

    def test_failure_keeps_previous_top_list(self):
        controller = HistogramController(URL, fetcher=serving(SAMPLE))
        asyncio.run(controller.load())
        before = controller.top_list

        controller._fetcher = failing()
        assert asyncio.run(controller.load()) is False
        assert controller.state is State.READY
        assert controller.top_list is before
        assert controller.can_export

    def test_success_clears_last_error(self):
        controller = HistogramController(URL, fetcher=failing())
        asyncio.run(controller.load())
        assert controller.last_error is not None

        controller._fetcher = serving(SAMPLE)
        asyncio.run(controller.load())
        assert controller.last_error is None

    def test_unexpected_fetch_error_restores_state(self):
        async def fetch(url):
            raise OSError("socket closed")

        controller = HistogramController(URL, fetcher=serving(SAMPLE))
        asyncio.run(controller.load())
        before = controller.top_list

        controller._fetcher = fetch
        assert asyncio.run(controller.load()) is False
        assert controller.state is State.READY
        assert controller.top_list is before
        assert isinstance(controller.last_error, RetrievalError)
        assert "socket closed" in controller.last_error.reason
