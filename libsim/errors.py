from typing import Optional


class CatalogError(Exception):
    """Base class for every failure reported by the catalog."""


class MalformedRecordError(CatalogError, ValueError):
    """A persisted line did not decompose into author, title and year."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ValidationError(CatalogError, ValueError):
    pass


class BusinessRuleError(CatalogError):
    pass


class NotFoundError(CatalogError, LookupError):
    def __init__(self, message: str, author: str, title: Optional[str] = None) -> None:
        super().__init__(message)
        self.author = author
        self.title = title


class AuthorNotFoundError(NotFoundError):
    def __init__(self, author: str, title: Optional[str] = None) -> None:
        super().__init__(f"No books by {author} in the catalog.", author, title)


class TitleNotFoundError(NotFoundError):
    def __init__(self, author: str, title: str) -> None:
        super().__init__(f"{author} is in the catalog, but '{title}' is not.", author, title)


class StorageError(CatalogError, OSError):
    pass


class EmptyCatalogError(CatalogError):
    """Raised at startup when no records were loaded and empty catalogs are not allowed."""

    def __init__(self, path: str, source_missing: bool = False) -> None:
        if source_missing:
            message = f"Catalog file {path} does not exist."
        else:
            message = f"Catalog file {path} contains no records."
        super().__init__(message)
        self.path = path
        self.source_missing = source_missing
