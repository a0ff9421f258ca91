"""Error types raised outside the conversion core."""


class RemToPxError(Exception):
    """Base class for rem-to-px errors."""


class ConfigError(RemToPxError, ValueError):
    """Raised when conversion options are invalid."""


class StylesheetParseError(RemToPxError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
