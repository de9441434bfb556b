from typing import Optional


class DepositApiError(Exception):
    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DepositApiError):
    """Client input failed one or more constraints."""

    status_code = 400
    default_message = "Invalid request parameters"

    @classmethod
    def from_errors(cls, errors):
        return cls(", ".join(errors))


class UnknownReferenceError(DepositApiError):
    """A company or user id does not resolve to a stored row."""

    status_code = 400
    default_message = "Referenced record not found"


class StorageError(DepositApiError):
    status_code = 500
    default_message = "Storage failure"


class NotFoundError(DepositApiError):
    status_code = 404
    default_message = "Endpoint not found"
