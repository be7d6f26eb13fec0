"""
Domain layer exceptions.

Raised when a business rule is broken. The HTTP layer maps them:
EntityNotFoundError to 404, everything else to 400.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """A value outside its domain, e.g. a review quality of 7."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvariantViolationError(DomainError):
    """A record whose counters or schedule no longer add up."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(
            f"Invariant violation in {aggregate}: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
