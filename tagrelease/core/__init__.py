"""Core types: results and exit codes.

``tagrelease.core.config`` is imported directly; it depends on the release
model, which itself builds on ``core.structured``.
"""

from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
