import logging

from word_histogram.config import LOG_LEVEL


def get_logger(name: str) -> logging.Logger:
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        )
        lg.addHandler(h)
        lg.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return lg
