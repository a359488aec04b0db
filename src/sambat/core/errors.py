from __future__ import annotations
from typing import Any, Dict, Optional


class SambatError(Exception):
    """Base error."""

    code = "SAMBAT_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConversionError(SambatError):
    """Caller-facing conversion failure (bad or unsupported input)."""


class OutOfRangeError(ConversionError):
    """The AD date or BS year lies outside the years covered by the table."""

    code = "OUT_OF_RANGE"


class InvalidBsDateError(ConversionError):
    """The BS year is known but the day does not exist in that month."""

    code = "INVALID_BS_DATE"


class InvalidStateError(SambatError):
    """The year table contradicted itself during a lookup (corrupt dataset)."""

    code = "INVALID_STATE"


class DatasetError(SambatError):
    """Raised while loading, parsing or indexing the year table."""

    code = "DATA_LOAD_ERROR"
