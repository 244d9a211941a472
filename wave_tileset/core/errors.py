"""
Fatal load errors. Anything recoverable is reported as a LoadWarning instead.
"""


class TilesetLoadError(Exception):
    """The tileset could not be loaded at all."""


class TilesetNotFoundError(TilesetLoadError, FileNotFoundError):
    pass


class TilesetIOError(TilesetLoadError, OSError):
    pass


class TilesetSyntaxError(TilesetLoadError, ValueError):
    """Malformed XML (anything other than a clean or truncated end)."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line:
            return f"{self.args[0]} (line {self.line}, column {self.column})"
        return self.args[0]
