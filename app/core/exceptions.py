class StoreLedgerException(Exception):
    """Base exception for the store ledger"""

    pass


class UnauthorizedException(StoreLedgerException):
    """Raised when JWT validation fails or no token is supplied"""

    pass


class NotFoundException(StoreLedgerException):
    """Raised when resource not found"""

    pass


class ForbiddenException(StoreLedgerException):
    """Raised when user tries to access a store they have no access to"""

    pass


class ValidationException(StoreLedgerException):
    """
    Raised for business logic validation errors.

    errors: optional per-field messages, [{"field": ..., "message": ...}]
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class PersistenceException(StoreLedgerException):
    """Raised when the database rejects or fails a write"""

    pass
