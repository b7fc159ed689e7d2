from word_histogram.controller import HistogramController, State
from word_histogram.exporter import to_csv
from word_histogram.fetcher import RetrievalError, fetch_document
from word_histogram.ranker import RankedEntry, rank, top_entries
from word_histogram.tokenizer import count_words, tokenize

__all__ = [
    "HistogramController",
    "RankedEntry",
    "RetrievalError",
    "State",
    "count_words",
    "fetch_document",
    "rank",
    "to_csv",
    "tokenize",
    "top_entries",
]
