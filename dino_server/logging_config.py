import logging
import sys


def setup_logging(level: int | str = logging.INFO):
    """Send every logger's output to stdout, replacing any earlier handlers."""
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s")
    )
    root.addHandler(handler)
    return root
