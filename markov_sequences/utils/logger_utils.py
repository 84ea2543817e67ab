# logger_utils.py -  logging setup and timing of code blocks

import logging
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("markov_sequences")


class Log:
    """Thin facade over the standard logging module for the CLI."""

    @staticmethod
    def setup(level: int = logging.WARNING, path: Optional[str] = None) -> None:
        """
        Configure root logging once for a command line run.
        Library modules only create loggers; handlers are attached here.
        """
        handlers = [logging.StreamHandler()]
        if path:
            handlers.append(logging.FileHandler(path, encoding="utf-8"))
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT,
                            handlers=handlers, force=True)

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts) as an INFO line.
        Example: train done: 0.123s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("train"):
                do_some_work()
        The elapsed time is available as `.elapsed` after the block.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
        return False
