"""
Adapter error types.

Every error raised out of a lifecycle call derives from AdapterError so a
host can catch the whole family in one place.
"""

from botocore.exceptions import ClientError


class AdapterError(Exception):
    """Base class for adapter errors."""

    def __init__(self, message: str, resource_id: str | None = None):
        self.message = message
        self.resource_id = resource_id
        super().__init__(self.message)


class ResourceApiError(AdapterError):
    """Raised when an AWS API call fails (network, auth, validation)."""

    @property
    def error_code(self) -> str | None:
        cause = self.__cause__
        if isinstance(cause, ClientError):
            return cause.response.get("Error", {}).get("Code")
        return None


class InvalidJsonError(AdapterError, ValueError):
    """Raised when a free-form JSON attribute does not parse."""
    pass


class SchemaValidationError(AdapterError, ValueError):
    """Raised when resource inputs do not satisfy the attribute schema."""

    def __init__(self, message: str, failures: list | None = None):
        self.failures = failures or []
        super().__init__(message)


class LayerDescriptorError(AdapterError):
    """Raised when a layer type descriptor declares an unsupported attribute type."""
    pass


class MalformedIdentifierError(AdapterError, ValueError):
    """Raised when a compound AWS identifier cannot be split as expected."""
    pass


def error_code(exc: ClientError) -> str:
    """Return the AWS error code carried by a ClientError."""
    return exc.response.get("Error", {}).get("Code", "")
