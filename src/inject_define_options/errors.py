"""Structural errors raised while extracting routes from a route file.

Per-route shape mismatches are never errors: the extractor skips them.
Only failures that make the whole route file unusable are raised here.
"""

from __future__ import annotations

__all__ = [
    "DefaultExportNotFoundError",
    "RouteArrayNotFoundError",
    "RouteExtractionError",
]


class RouteExtractionError(RuntimeError):
    """Base class for route files that cannot be turned into routes."""


class DefaultExportNotFoundError(RouteExtractionError):
    """Raised when the route file has no `export default <expression>`."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"No export default statement found{where}")


class RouteArrayNotFoundError(RouteExtractionError):
    """Raised when the default export does not resolve to an array literal.

    Accepted shapes are an array literal, an array literal with an `as`
    type assertion, or an identifier whose initializer is one of those.
    """

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(
            f"export default is neither an array expression nor a variable "
            f"pointing to one{where}"
        )
