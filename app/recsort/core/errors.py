"""Exceptions raised by the prune and organize operations."""


class RecsortError(Exception):
    """Base exception for recsort errors."""


class RootResolutionError(RecsortError):
    """Raised when the working root directory cannot be resolved."""


class NameCollisionError(RecsortError):
    """Raised when no free disambiguated file name can be found."""

    def __init__(self, directory: str, filename: str, attempts: int) -> None:
        self.directory = directory
        self.filename = filename
        self.attempts = attempts
        super().__init__(
            f"No free name for {filename} in {directory} after {attempts} attempts"
        )
