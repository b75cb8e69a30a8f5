import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Attach one stdout handler to the root logger, once per process."""
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    # SQL statement echo only when asked for explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    if root.handlers:
        return  # uvicorn / pytest already installed handlers

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
