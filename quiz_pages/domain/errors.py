from pathlib import Path


class ContentError(Exception):
    """Quiz content could not be turned into a Quiz. Fatal at startup."""

    def __init__(self, source: Path | str, reason: str) -> None:
        self.source = str(source)
        self.reason = reason
        super().__init__(f"{self.source}: {reason}")


class ContentUnavailable(ContentError):
    """The content file cannot be opened or read."""


class ContentMalformed(ContentError):
    """The content file does not match the quiz document shape."""
