"""Exceptions raised by hallinks."""


class HalLinksError(Exception):
    """Base class for all hallinks errors."""


class HalFormatError(HalLinksError, ValueError):
    """
    A ``_links`` payload is not in application/hal+json format.

    Raised when a relation type maps to something other than a link object
    or a list of link objects, or when a link object has no string ``href``.
    """

    def __init__(self, message: str, rel: str | None = None):
        super().__init__(message)
        self.rel = rel


class InvalidRelationError(HalLinksError, ValueError):
    """A link cannot be registered as a CURI in a RelRegistry."""
