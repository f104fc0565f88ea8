"""
Exceptions raised by the SDK itself.

Service operations never raise for transport problems or HTTP error
statuses; the only error raised on the request path is ValidationError,
when a line item model cannot be serialized.
"""


class VeryfiError(Exception):
    """Root of the SDK exception hierarchy."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(VeryfiError):
    """A line item payload is missing its required fields, or has none set."""

    def __init__(self, message: str = "Line item validation failed"):
        super().__init__(message)
