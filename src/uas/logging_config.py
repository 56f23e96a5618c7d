# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import os


def configure_logging() -> None:
    """Simple, dev-friendly logging setup.

    Uvicorn config can override this, but this gives us sane defaults when running locally.
    """
    level = os.getenv("UAS_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
