"""Custom exceptions for brew-codec."""


class BrewCodecError(Exception):
    """Base exception for brew-codec."""

    pass


class StructuralError(BrewCodecError):
    """Raised when input is recognised as a record kind but breaks a hard invariant."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UnrecognizedInputError(BrewCodecError):
    """Raised when neither a tagged-text sentinel nor a JSON shape matches."""

    def __init__(self, reason: str = "could not recognize data"):
        super().__init__(reason)
        self.reason = reason


class AuthenticationError(BrewCodecError):
    """Raised when API key is invalid or missing."""

    pass


class RateLimitError(BrewCodecError):
    """Raised when API rate limit is exceeded."""

    pass


class ImageError(BrewCodecError):
    """Raised when image cannot be read or is invalid."""

    pass
