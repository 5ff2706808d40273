"""
Custom Exceptions.

Error taxonomy for the advisor client. Every failure surfaces to the top
level as one of these and is printed as a single line.
"""


class AdvisorError(Exception):
    """Base exception for all advisor client errors."""

    exit_code = 1

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigNotFound(AdvisorError):
    """Raised when the settings file is missing or cannot be parsed."""

    exit_code = 2

    def __init__(self, message: str = "Could not open config") -> None:
        super().__init__(message, code="CFG_NOT_FOUND")


class InstanceNotFound(AdvisorError):
    """Raised when the requested or default app does not resolve."""

    exit_code = 2

    def __init__(self, message: str = "App not found") -> None:
        super().__init__(message, code="CFG_INSTANCE_NOT_FOUND")


class UnsupportedCommand(AdvisorError):
    """Raised when a command has no network operation behind it."""

    def __init__(self, message: str = "Command not supported") -> None:
        super().__init__(message, code="CMD_UNSUPPORTED")


class RemoteAPIError(AdvisorError):
    """Raised on any transport failure, timeout, or non-2xx response."""

    def __init__(self, message: str = "Error reading remote API") -> None:
        super().__init__(message, code="NET_REMOTE_API_ERROR")


class MalformedResponse(AdvisorError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str = "Malformed response from remote API") -> None:
        super().__init__(message, code="NET_MALFORMED_RESPONSE")


class TokenizerContractError(AdvisorError):
    """
    Raised when the argument tokenizer hands over a value it should have rejected.

    Enumerated arguments (show kind, update mode) are constrained upstream,
    so this indicates a wiring bug rather than bad user input.
    """

    exit_code = 2

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CMD_TOKENIZER_CONTRACT")
