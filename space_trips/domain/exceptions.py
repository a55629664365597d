"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidCursorError(DomainError):
    """Raised when a pagination cursor does not match any launch in the result set."""

    def __init__(self, cursor: str):
        self.cursor = cursor
        super().__init__(f"Cursor does not match any launch: {cursor!r}")
