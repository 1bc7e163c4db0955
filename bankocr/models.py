# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Data models exchanged between the parser, the processor and the sinks.

Two tagged unions are defined here. ``LineStatus`` is what the line parser
returns for every physical line; ``EntryResult`` is what the processor emits
once per entry. Every variant carries a ``kind`` literal so payloads stay
self-describing when dumped to JSON, and every model is frozen: a status or
result is never mutated after it has been returned.
"""
from __future__ import annotations

from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ParseError(BaseModel):
    """Location and description of a malformed glyph line."""

    model_config = ConfigDict(frozen=True)

    message: str
    line_number: int = Field(..., ge=1)
    col: int = Field(..., ge=0)
    row: int = Field(..., ge=0, le=3)


# ---------------------------------------------------------------------------
# Per-line parser status
# ---------------------------------------------------------------------------


class EntrySuccess(BaseModel):
    """All nine digits of the entry decoded."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    account_number: str


class EntryBadDigits(BaseModel):
    """At least one digit was illegible and is shown as ``?``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_digits"] = "bad_digits"
    account_number: str
    alternates: List[str] = Field(default_factory=list)


class EntryError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    error: ParseError


class EntryIncomplete(BaseModel):
    """More lines are needed before the entry is complete."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["incomplete"] = "incomplete"


LineStatus = Union[EntrySuccess, EntryBadDigits, EntryError, EntryIncomplete]


# ---------------------------------------------------------------------------
# Per-entry processor results
# ---------------------------------------------------------------------------


class Success(BaseModel):
    """Account number decoded and checksum valid."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    account_number: str
    line_number: int = Field(..., ge=1)


class BadChecksum(BaseModel):
    """Account number decoded but failed the checksum.

    ``alternates`` holds every single-segment correction that passes the
    checksum, in search order. It may be empty or hold several candidates;
    choosing among them is left to the caller.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_checksum"] = "bad_checksum"
    account_number: str
    alternates: List[str] = Field(default_factory=list)
    line_number: int = Field(..., ge=1)


class BadDigits(BaseModel):
    """Illegible digits; ``alternates`` are checksum-valid repairs."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_digits"] = "bad_digits"
    account_number: str
    alternates: List[str] = Field(default_factory=list)
    line_number: int = Field(..., ge=1)


class InvalidCharacter(BaseModel):
    """Entry discarded because of a malformed line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["invalid_character"] = "invalid_character"
    error: ParseError

    @property
    def line_number(self) -> int:
        return self.error.line_number


EntryResult = Union[Success, BadChecksum, BadDigits, InvalidCharacter]
