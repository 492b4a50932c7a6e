"""
Logging utilities for safe structured logging.

Summarises document fragments for log context instead of dumping whole
payloads, which come from a server the client does not control.

Dependencies: logging (stdlib), catalogue.models.json_value
System role: Logging helper functions
"""

import logging
from typing import Any

from catalogue.models.json_value import JSONArray, JSONNode, JSONObject


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a short string for logging.

    JSON objects and arrays are reduced to their size; strings are truncated.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, JSONObject):
            text = f"object({len(value.value)} keys)"
        elif isinstance(value, JSONArray):
            text = f"array({len(value.value)} items)"
        elif isinstance(value, JSONNode):
            text = repr(value.to_python())
        elif isinstance(value, str):
            text = value
        elif isinstance(value, (list, tuple)):
            text = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            text = f"dict({len(value)} keys)"
        else:
            text = str(value)

        if len(text) > max_length:
            return text[:max_length] + f"... (truncated, {len(text)} total)"
        return text
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as record attributes
    """
    if not logger.isEnabledFor(level):
        return
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context)
