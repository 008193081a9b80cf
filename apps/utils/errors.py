# apps/utils/errors.py

class SelectorPageError(Exception):
    """Base class for every failure raised by the selector page."""


class RenderFailure(SelectorPageError):
    """The results provider or a template failed while building a response body."""


class LookupFailure(SelectorPageError):
    """A directory search failed, either on the server or while reading its response."""


class NetworkFailure(SelectorPageError):
    """A client call to the server did not complete or came back with a server error."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class DialogStateError(SelectorPageError):
    """An action was attempted that the dialog's current state does not allow."""
