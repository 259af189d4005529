class NamerError(Exception):
    """Base class for naming errors surfaced to callers."""


class InvalidInput(NamerError, ValueError):
    """A required field was empty or missing. Raised before any network call."""


class GenerationFailure(NamerError):
    """The remote call failed or its reply did not match the name schema."""

    def __init__(self, message: str = "Failed to generate names"):
        super().__init__(message)
