from enum import Enum
from typing import Awaitable, Callable, Optional, Tuple

from word_histogram.config import SOURCE_URL, TOP_N
from word_histogram.exporter import to_csv
from word_histogram.fetcher import RetrievalError, fetch_document
from word_histogram.log import get_logger
from word_histogram.ranker import RankedEntry, top_entries
from word_histogram.tokenizer import count_words

logger = get_logger(__name__)

TopList = Tuple[RankedEntry, ...]
Fetcher = Callable[[str], Awaitable[str]]
Renderer = Callable[[TopList], None]


class State(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


class HistogramController:
    """
    Runs fetch -> count -> rank for one document and keeps the resulting
    top list for the chart and the CSV export.

    The controller is the only writer of the top list. A failed load leaves
    the previous list (or the lack of one) in place.
    """

    def __init__(
        self,
        source_url: str = SOURCE_URL,
        fetcher: Fetcher = fetch_document,
        renderer: Optional[Renderer] = None,
        top_n: int = TOP_N,
    ):
        self._source_url = source_url
        self._fetcher = fetcher
        self.renderer = renderer
        self._top_n = top_n
        self._top_list: Optional[TopList] = None
        self._state = State.IDLE
        self._last_error: Optional[RetrievalError] = None

    @property
    def source_url(self) -> str:
        return self._source_url

    @property
    def state(self) -> State:
        return self._state

    @property
    def top_list(self) -> Optional[TopList]:
        return self._top_list

    @property
    def last_error(self) -> Optional[RetrievalError]:
        return self._last_error

    @property
    def can_export(self) -> bool:
        return self._top_list is not None

    async def load(self, source_url: Optional[str] = None) -> bool:
        url = source_url or self._source_url
        self._state = State.LOADING
        logger.info(f"Loading {url}")
        try:
            text = await self._fetcher(url)
        except Exception as e:
            error = e if isinstance(e, RetrievalError) else RetrievalError(url, str(e))
            logger.error(f"Error fetching data: {error}")
            self._last_error = error
            self._state = State.READY if self._top_list is not None else State.IDLE
            return False

        counts = count_words(text)
        top = tuple(top_entries(counts, self._top_n))
        self._top_list = top
        self._last_error = None
        self._state = State.READY
        logger.info(
            f"Counted {sum(counts.values())} words ({len(counts)} distinct) from {url}"
        )
        if self.renderer is not None:
            self.renderer(top)
        return True

    def export_current(self) -> Optional[str]:
        if self._top_list is None:
            return None
        return to_csv(self._top_list)
