from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Apply a basic root logging config once for the app and the CLI."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=_FORMAT)
    # httpx logs every request at INFO; keep it quiet unless debugging
    if level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
