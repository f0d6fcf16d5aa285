"""Exceptions raised by ssh_bookmarker."""


class BookmarkerError(Exception):
    """Base class for ssh_bookmarker errors."""


class BookmarkNameError(BookmarkerError):
    """Host and scheme would produce a bookmark path outside the output directory."""

    def __init__(self, host: str, scheme: str) -> None:
        self.host = host
        self.scheme = scheme
        super().__init__(
            f"{host} with protocol {scheme} would result in a bad filename"
        )


class ConditionFormatError(BookmarkerError):
    """A host condition spec is not of the form FILE,REGEX."""

    def __init__(self, spec: str, reason: str | None = None) -> None:
        self.spec = spec
        message = f"{spec} is not a valid condition spec: format is FILENAME,REGEX"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
