"""Zentrale Exporte für das ``ytjfetch``-Paket."""

from .errors import (
    ClientError,
    FormatError,
    InputError,
    NotFoundOrAmbiguousError,
    ParseError,
    RetryExhaustedError,
    YtjError,
)
from .identifiers import validate
from .normalize import normalize
from .pipeline import BatchResult, run_batch
from .records import OutputRecord, PostalAddress, VisitingAddress
from .table_io import load_identifiers, write_records
from .utils.logging_setup import setup_logger

__all__ = [
    "BatchResult",
    "ClientError",
    "FormatError",
    "InputError",
    "NotFoundOrAmbiguousError",
    "OutputRecord",
    "ParseError",
    "PostalAddress",
    "RetryExhaustedError",
    "VisitingAddress",
    "YtjError",
    "load_identifiers",
    "normalize",
    "run_batch",
    "setup_logger",
    "validate",
    "write_records",
]
