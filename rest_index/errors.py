"""
REST Resource Index - Errors

Exception hierarchy shared by the decoder, indexer, fetcher and loader.
"""

from typing import Optional


class ResourceIndexError(Exception):
    """Base class for all resource indexing failures."""


class HierarchyDecodeError(ResourceIndexError):
    """The hierarchy document is malformed or has an unsupported node shape."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{message} (at {path})")


class DuplicateResourceError(ResourceIndexError):
    """Two nodes share an identifier while collisions are reported."""

    def __init__(self, identifier: str, first_breadcrumbs: str, second_breadcrumbs: str):
        self.identifier = identifier
        self.first_breadcrumbs = first_breadcrumbs
        self.second_breadcrumbs = second_breadcrumbs
        super().__init__(
            f"Duplicate resource '{identifier}' found under "
            f"'{first_breadcrumbs}' and '{second_breadcrumbs}'"
        )


class FetchError(ResourceIndexError):
    """Retrieving a document from the REST endpoint failed."""

    def __init__(self, uri: str, reason: str, status_code: Optional[int] = None):
        self.uri = uri
        self.status_code = status_code
        super().__init__(f"Failed to fetch {uri}: {reason}")


class ResourceNotFoundError(ResourceIndexError, KeyError):
    """No resource is indexed under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown resource: {self.name}"
