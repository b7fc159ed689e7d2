import os

from dotenv import load_dotenv

load_dotenv()

SOURCE_URL = os.getenv(
    "WORD_HISTOGRAM_SOURCE_URL", "https://www.terriblytinytales.com/test.txt"
)
TOP_N = int(os.getenv("WORD_HISTOGRAM_TOP_N", "20"))
REQUEST_TIMEOUT = float(os.getenv("WORD_HISTOGRAM_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("WORD_HISTOGRAM_LOG_LEVEL", "INFO").upper()

EXPORT_FILENAME = "word_histogram.csv"
EXPORT_MIME = "text/csv"
