from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_MEDIA_QUERIES: tuple[str, ...] = ("sm", "md", "lg", "xl")


class GroupPolicy(Enum):
    """How component and utility selectors are combined into the index."""

    COMPONENTS_FIRST = "components-first"
    COMPONENTS_LAST = "components-last"
    AS_IS = "as-is"


class UnknownPosition(Enum):
    """Where classes missing from the selector index are placed."""

    START = "start"
    END = "end"


@dataclass(frozen=True)
class SorterOptions:
    group_policy: GroupPolicy = GroupPolicy.COMPONENTS_FIRST
    unknown_position: UnknownPosition = UnknownPosition.START
    media_queries: tuple[str, ...] = DEFAULT_MEDIA_QUERIES
    sort_within_group: bool = False
    separator: str | None = None  # None: use the resolved config's separator
