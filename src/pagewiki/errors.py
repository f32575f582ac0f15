"""Exceptions raised by pagewiki."""


class PagewikiError(Exception):
    """Base class for pagewiki errors."""


class PageNotFoundError(PagewikiError):
    """Page could not be read (missing, unreadable, or invalid name)."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageSaveError(PagewikiError):
    """Page body could not be written."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title


class TemplateLoadError(PagewikiError):
    """Templates could not be loaded or parsed at startup."""


class RenderError(PagewikiError):
    """Template execution failed."""
