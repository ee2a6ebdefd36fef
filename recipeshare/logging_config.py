"""Root logger setup shared by the app and the command line entry point."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO", logfile: Optional[Union[str, Path]] = None
) -> None:
    """Attach a console handler (and a file handler if ``logfile`` is given)
    to the root logger.

    Does nothing when the root logger already has handlers, so importing the
    app under pytest or uvicorn does not stack duplicate output.
    Unknown level names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        file_handler = logging.FileHandler(
            Path(logfile).resolve(), encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
