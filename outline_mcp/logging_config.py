"""
Logging setup.

Everything goes to stderr: stdout carries the MCP stdio channel.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from outline_mcp.config import LogSettings


def setup_logging(settings: LogSettings) -> None:
    """Configure the root logger for text or JSON output on stderr."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.level, logging.INFO))

    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if settings.format == "json":
        handler.setFormatter(JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
        ))
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s",
            datefmt="%H:%M:%S",
        ))

    root.addHandler(handler)

    # httpx logs every request at INFO; the client hooks already cover that
    logging.getLogger("httpx").setLevel(logging.WARNING)
