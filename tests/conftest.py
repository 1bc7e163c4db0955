# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Pytest configuration shared across the suite."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bankocr.config import LOGGER_NAME  # noqa: E402


def _reset_package_logger(logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def package_logger():
    """Give every test a ``bankocr`` logger without handlers from earlier runs."""
    logger = logging.getLogger(LOGGER_NAME)
    _reset_package_logger(logger)
    yield logger
    _reset_package_logger(logger)
