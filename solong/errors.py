"""Exceptions raised while loading, checking and playing a map."""

ERROR_HEADER = "Error\n"


class SoLongError(Exception):
    """A fatal problem; the program reports it and exits with status 1."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MapError(SoLongError):
    """The map file was read, but its content is not a playable map."""


def format_error(message: object) -> str:
    """Return the text written to standard error for ``message``.

    ``message`` may be a plain string or an exception; the result is the
    ``Error`` header line followed by the message and a newline.
    """
    return f"{ERROR_HEADER}{message}\n"