import logging


class NonErrorFilter(logging.Filter):
    """Keep records below WARNING so they go to stdout only."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= logging.INFO
