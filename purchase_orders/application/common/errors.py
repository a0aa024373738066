"""
Application error taxonomy.

Every use case failure is reported as exactly one of four shapes:

- ``validation``: bad input or a broken domain rule; the caller can fix it
- ``not_found``: a referenced entity does not exist
- ``conflict``: a state precondition was violated
- ``infra``: a collaborator or transport failed; usually retryable

``map_to_app_error`` folds any raised condition into this closed set.
"""

from dataclasses import dataclass, field
from typing import Literal

from purchase_orders.domain.common.exceptions import DomainError
from purchase_orders.exceptions import ApplicationError, ConflictError, NotFoundError

NOT_FOUND_MARKER = "not found"


@dataclass(frozen=True)
class ValidationAppError:
    message: str
    details: dict[str, str] | None = None
    cause: object = field(default=None, compare=False, repr=False)
    type: Literal["validation"] = field(default="validation", init=False)


@dataclass(frozen=True)
class NotFoundAppError:
    resource: str
    id: str | None = None
    message: str = ""
    type: Literal["not_found"] = field(default="not_found", init=False)


@dataclass(frozen=True)
class ConflictAppError:
    message: str
    resource: str | None = None
    id: str | None = None
    type: Literal["conflict"] = field(default="conflict", init=False)


@dataclass(frozen=True)
class InfraAppError:
    message: str
    cause: object = field(default=None, compare=False, repr=False)
    type: Literal["infra"] = field(default="infra", init=False)


AppError = ValidationAppError | NotFoundAppError | ConflictAppError | InfraAppError

APP_ERROR_TYPES = (ValidationAppError, NotFoundAppError, ConflictAppError, InfraAppError)


def validation_error(
    message: str, details: dict[str, str] | None = None, cause: object = None
) -> ValidationAppError:
    return ValidationAppError(message=message, details=details, cause=cause)


def not_found_error(resource: str, id: str | None = None) -> NotFoundAppError:
    message = f'{resource} "{id}" not found' if id else f"{resource} not found"
    return NotFoundAppError(resource=resource, id=id, message=message)


def conflict_error(
    message: str, resource: str | None = None, id: str | None = None
) -> ConflictAppError:
    return ConflictAppError(message=message, resource=resource, id=id)


def infra_error(message: str, cause: object = None) -> InfraAppError:
    return InfraAppError(message=message, cause=cause)


def is_app_error(value: object) -> bool:
    return isinstance(value, APP_ERROR_TYPES)


def map_to_app_error(raw: object, resource: str, id: str | None = None) -> AppError:
    """
    Classify any condition raised inside a use case.

    Args:
        raw: The caught exception (or any other object)
        resource: Resource the use case operates on, e.g. "order"
        id: Identifier of that resource, when known

    Returns:
        Exactly one AppError; the mapping never fails
    """
    if isinstance(raw, APP_ERROR_TYPES):
        return raw

    if isinstance(raw, ApplicationError):
        return raw.error

    if isinstance(raw, DomainError):
        details = {key: str(value) for key, value in raw.details.items()}
        details["code"] = raw.code
        return validation_error(raw.message, details, raw)

    if isinstance(raw, ConflictError) or getattr(raw, "code", None) == "conflict":
        return conflict_error(
            str(raw),
            getattr(raw, "resource", None) or resource,
            getattr(raw, "id", None) or id,
        )

    if isinstance(raw, NotFoundError):
        return not_found_error(raw.resource, raw.id)

    if isinstance(raw, Exception):
        message = str(raw)
        if NOT_FOUND_MARKER in message.lower():
            return not_found_error(resource, id)
        return infra_error(message or type(raw).__name__, raw)

    return infra_error("Unexpected error", raw)
