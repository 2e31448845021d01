"""
templater exception classes.

This package provides all exception types used throughout templater for
consistent error handling and reporting.
"""

from templater.exceptions.core import (
    BadFormatError,
    ErrorContext,
    ReadErrorKind,
    TemplateDefinitionError,
    TemplateReadError,
    TemplaterError,
    TooManyError,
    UnknownTargetError,
)

__all__ = [
    "TemplaterError",
    "TemplateReadError",
    "ReadErrorKind",
    "ErrorContext",
    "BadFormatError",
    "TooManyError",
    "TemplateDefinitionError",
    "UnknownTargetError",
]
