from __future__ import annotations

import logging
import sys

from core.config import LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    # stderr only: stdout carries the MCP stdio channel
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL or "INFO").upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
