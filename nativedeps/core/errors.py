class NativeDepsError(Exception):
    """Base class for nativedeps errors."""


class UnsupportedPlatformError(NativeDepsError):
    """No supported package manager was found on this host."""

    def __init__(self, message: str = "unsupported distribution"):
        super().__init__(message)
