"""Exception hierarchy for the voice catalog client.

All custom exceptions inherit from VoiceCatalogError to enable
selective catching at different levels.

Hierarchy:
    VoiceCatalogError (base)
    ├── TransportError - Request did not complete with a success status
    ├── ParseError - Response body is not the expected structured shape
    └── ConfigError - Configuration issues (invalid values)

TransportError and ParseError never cross the public API: the fetchers
catch them and report a failed result instead.
"""


class VoiceCatalogError(Exception):
    """
    Base exception for all voice catalog errors.

    Catching this will catch all custom exceptions from this module.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(VoiceCatalogError):
    """
    Transport error.

    Raised when a request does not complete with a 2xx status, or when
    the network call itself faults (DNS, connection reset, timeout).
    Reading a local catalog file that cannot be opened is also a
    transport failure.

    Attributes:
        location: URL or path that was requested
        status_code: HTTP status if a response was received
        original_error: Original exception if wrapping
    """

    def __init__(
        self,
        message: str,
        location: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        self.location = location
        self.status_code = status_code
        self.original_error = original_error
        super().__init__(message)


class ParseError(VoiceCatalogError):
    """
    Structured data error.

    Raised when a response body cannot be interpreted as the expected
    shape. Examples: invalid JSON, a JSON array where an object is
    required.

    Attributes:
        location: URL or path the body came from
        original_error: Original exception if wrapping
    """

    def __init__(
        self,
        message: str,
        location: str | None = None,
        original_error: Exception | None = None,
    ):
        self.location = location
        self.original_error = original_error
        super().__init__(message)


class ConfigError(VoiceCatalogError):
    """
    Configuration error.

    Raised when configuration values are invalid.
    Examples: an empty synthesis base URL.
    """

    pass
