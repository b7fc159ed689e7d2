from typing import List, Mapping, NamedTuple

from word_histogram.config import TOP_N


class RankedEntry(NamedTuple):
    word: str
    count: int


def rank(counts: Mapping[str, int]) -> List[RankedEntry]:
    """Sort by count descending; equal counts keep the mapping's order."""
    return [
        RankedEntry(word, count)
        for word, count in sorted(counts.items(), key=lambda x: x[1], reverse=True)
    ]


def top_entries(counts: Mapping[str, int], limit: int = TOP_N) -> List[RankedEntry]:
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return rank(counts)[:limit]
