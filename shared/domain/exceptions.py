"""
Domain Exceptions

Error taxonomy shared by the domain apps:
- NotFoundError: An identifier does not resolve to a record
- InvalidArgumentError: Input rejected before any computation
- ConflictError: A write would break a uniqueness or overlap rule
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError, LookupError):
    """Raised when a hotel, room, guest or booking id does not resolve."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class InvalidArgumentError(DomainError, ValueError):
    """Raised for arguments that make a computation undefined."""


class ConflictError(DomainError):
    """Raised when a room is busy for requested dates or a room number is taken."""
