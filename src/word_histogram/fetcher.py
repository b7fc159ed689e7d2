import asyncio
from typing import Optional

import requests

from word_histogram.config import REQUEST_TIMEOUT
from word_histogram.log import get_logger

logger = get_logger(__name__)


class RetrievalError(Exception):
    """The document at ``url`` could not be fetched or decoded."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not retrieve {url}: {reason}")
        self.url = url
        self.reason = reason


def fetch_text(url: str, timeout: float = REQUEST_TIMEOUT) -> str:
    logger.debug(f"GET {url} (timeout={timeout}s)")
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        return r.text
    except (requests.RequestException, UnicodeError) as e:
        raise RetrievalError(url, str(e)) from e


async def fetch_document(url: str, timeout: Optional[float] = None) -> str:
    """Fetch ``url`` without blocking the event loop."""
    if timeout is None:
        timeout = REQUEST_TIMEOUT
    return await asyncio.to_thread(fetch_text, url, timeout)
