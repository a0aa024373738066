"""
Application common module.

Contains base classes for application layer:
- Command / CommandHandler: Write operations and their handlers
- Result: Success/Failure outcome of every use case
- AppError: The closed application error taxonomy
"""

from .command import Command, CommandHandler
from .errors import (
    AppError,
    ConflictAppError,
    InfraAppError,
    NotFoundAppError,
    ValidationAppError,
    conflict_error,
    infra_error,
    is_app_error,
    map_to_app_error,
    not_found_error,
    validation_error,
)
from .result import Failure, Result, Success, fail, is_failure, is_success, match, ok

__all__ = [
    "AppError",
    "Command",
    "CommandHandler",
    "ConflictAppError",
    "Failure",
    "InfraAppError",
    "NotFoundAppError",
    "Result",
    "Success",
    "ValidationAppError",
    "conflict_error",
    "fail",
    "infra_error",
    "is_app_error",
    "is_failure",
    "is_success",
    "map_to_app_error",
    "match",
    "not_found_error",
    "ok",
    "validation_error",
]
