from __future__ import annotations

import logging
import sys
from botkit.common.config import settings


def setup_logging(level: str | None = None) -> None:
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
