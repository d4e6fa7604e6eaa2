"""Custom exceptions used across pagediff."""

__all__ = ["PageDiffError", "InvalidParamsError", "DocumentLoadError"]


class PageDiffError(Exception):
    """Base class for errors raised by pagediff."""

    pass


class InvalidParamsError(PageDiffError, ValueError):
    """Raised when diff parameters are out of range."""

    pass


class DocumentLoadError(PageDiffError, RuntimeError):
    """Raised when a PDF cannot be opened."""

    pass
