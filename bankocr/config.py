# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Environment-driven settings and logging setup."""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence

LOGGER_NAME = "bankocr"

OUTPUT_FORMATS = ("text", "jsonl")
LOG_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


def _env_choice(
    environ: Mapping[str, str],
    name: str,
    default: str,
    choices: Sequence[str],
    *,
    upper: bool = False,
) -> str:
    raw = _env_str(environ, name, default)
    value = raw.upper() if upper else raw.lower()
    return value if value in choices else default


@dataclass(frozen=True)
class Settings:
    encoding: str = "utf-8"
    output_format: str = "text"
    log_level: str = "WARNING"
    log_format: str = "text"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            encoding=_env_str(env, "BANKOCR_ENCODING", cls.encoding),
            output_format=_env_choice(env, "BANKOCR_OUTPUT_FORMAT", cls.output_format, OUTPUT_FORMATS),
            log_level=_env_choice(env, "BANKOCR_LOG_LEVEL", cls.log_level, LOG_LEVELS, upper=True),
            log_format=_env_choice(env, "BANKOCR_LOG_FORMAT", cls.log_format, LOG_FORMATS),
        )


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))
    logger.propagate = False
    return logger


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def format_run_summary(
    input_path: str,
    total: int,
    by_kind: Mapping[str, int],
    *,
    fmt: str = "text",
) -> str:
    """Render the end-of-run summary line for the package logger.

    ``json`` gives one object with a UTC timestamp; ``text`` gives e.g.
    ``scan.txt: 3 entries (bad_checksum=1, success=2)``.
    """
    counts = {kind: by_kind[kind] for kind in sorted(by_kind)}
    if fmt == "json":
        record = {
            "ts": _utc_now_iso(),
            "event": "run_complete",
            "input": input_path,
            "entries": total,
            "by_kind": counts,
        }
        return json.dumps(record, ensure_ascii=False)

    noun = "entry" if total == 1 else "entries"
    if not counts:
        return f"{input_path}: {total} {noun}"
    breakdown = ", ".join(f"{kind}={count}" for kind, count in counts.items())
    return f"{input_path}: {total} {noun} ({breakdown})"
