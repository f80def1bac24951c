"""Explicit error handling for jobrail.

- Result/Ok/Err: failures as values, railway-oriented composition
- Option/Some/Nothing: absence as a value
- ErrorCode/ErrorTrace/ErrorContext: typed failures with context stacking
"""

from .errors import ErrorCode, invalid_input, is_invalid_input, not_found
from .option import Nothing, Option, Some, from_nullable
from .result import Err, Ok, Result
from .types import ErrorContext, ErrorTrace, JsonDict, JsonValue, context, trace

__all__ = [
    # Codes
    "ErrorCode", "invalid_input", "not_found", "is_invalid_input",
    # Result monad
    "Result", "Ok", "Err",
    # Option monad
    "Option", "Some", "Nothing", "from_nullable",
    # Error context
    "ErrorContext", "ErrorTrace", "context", "trace",
    # JSON aliases
    "JsonDict", "JsonValue",
]
