"""
Bookmarker — UI Route Table
===========================

What:  Static navigation table mapping URL paths to UI components.
Why:   The UI shell consults it to decide which component to render.
How:   register_routes() validates a list of (path, name, component) triples
       once at startup and returns an immutable RouteTable.

Matching rules:
    Exact path match only. No wildcards, parameters, nesting, redirects or
    guards. Unmatched paths resolve to None; the shell decides what to do.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from bookmarker.exceptions import ValidationError
from bookmarker.ui.components import Bookmarker, Component

logger = logging.getLogger(__name__)


class RouteEntry(BaseModel):
    """One (path, name, component) triple. Immutable after creation."""

    path: str = Field(description="Absolute URL path, e.g. '/'")
    name: str = Field(min_length=1, description="Unique route name")
    component: Component = Field(description="Component rendered for this path")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"Route path '{v}' must start with '/'")
        return v


RouteDefinition = Union[RouteEntry, Tuple[str, str, Component]]


class RouteTable:
    """Ordered, read-only collection of route entries."""

    def __init__(self, entries: Sequence[RouteEntry]):
        self._entries: Tuple[RouteEntry, ...] = tuple(entries)
        self._by_path: Dict[str, RouteEntry] = {entry.path: entry for entry in self._entries}

    def resolve(self, path: str) -> Optional[RouteEntry]:
        """Return the entry registered for exactly this path, or None."""
        return self._by_path.get(path)

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<RouteTable({', '.join(e.path for e in self._entries)})>"


def register_routes(routes: Iterable[RouteDefinition]) -> RouteTable:
    """
    Build a RouteTable from static route definitions.

    Accepts RouteEntry objects or plain (path, name, component) tuples.

    Raises:
        ValidationError: a path or name is registered twice, or a tuple
        definition is malformed (relative path, empty name, non-component).
    """
    entries: List[RouteEntry] = []
    seen_paths = set()
    seen_names = set()

    for route in routes:
        if not isinstance(route, RouteEntry):
            path, name, component = route
            try:
                route = RouteEntry(path=path, name=name, component=component)
            except PydanticValidationError as e:
                raise ValidationError(
                    message=f"Invalid route definition for '{path}'",
                    context={"errors": [err["msg"] for err in e.errors()]},
                ) from e

        if route.path in seen_paths:
            raise ValidationError(
                message=f"Route path '{route.path}' is registered more than once",
                field="path",
            )
        if route.name in seen_names:
            raise ValidationError(
                message=f"Route name '{route.name}' is registered more than once",
                field="name",
            )
        seen_paths.add(route.path)
        seen_names.add(route.name)
        entries.append(route)

    logger.debug("Registered %d UI route(s): %s", len(entries), [e.path for e in entries])
    return RouteTable(entries)


# ── Application Routes ────────────────────────────────────────────────────
ROUTES: List[RouteDefinition] = [
    ("/", "Bookmarker", Bookmarker()),
]


def default_route_table() -> RouteTable:
    """The application's navigation table: '/' → Bookmarker."""
    return register_routes(ROUTES)
