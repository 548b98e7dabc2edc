class ContentError(Exception):
    """Base error for content loading."""

    def __init__(self, identifier, message=""):
        self.identifier = identifier
        super().__init__(message or identifier)


class ContentNotFoundError(ContentError):
    """Category directory or slug has no source file."""


class ContentParseError(ContentError):
    """Front matter could not be parsed or validated."""
