import re
from collections import Counter
from typing import Dict, List

WORD_RE = re.compile(r"\w+", re.ASCII)


def tokenize(text: str) -> List[str]:
    """Lowercased word tokens in the order they appear in the text."""
    return WORD_RE.findall(text.lower())


def count_words(text: str) -> Dict[str, int]:
    """
    Map each word to the number of times it occurs.

    Keys come out in first-encounter order, which the ranker relies on
    to break ties between equal counts.
    """
    return dict(Counter(tokenize(text)))
