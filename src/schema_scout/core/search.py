"""Search-term normalization and the match → rank → truncate pipeline."""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

_WHITESPACE = re.compile(r"\s+")


class Named(Protocol):
    @property
    def name(self) -> str | None: ...


NamedT = TypeVar("NamedT", bound=Named)


@dataclass(frozen=True)
class Truncated(Generic[NamedT]):
    items: list[NamedT]
    was_truncated: bool
    total: int


def normalize_query(raw: str) -> str:
    """Canonicalize a search term: trim, drop one trailing ``s``, strip all whitespace, lower-case.

    An empty result after trimming means "match everything"; callers check
    ``raw.strip()`` for that case before normalizing.
    """
    term = raw.strip()
    if term.endswith("s"):
        term = term[:-1]
    return _WHITESPACE.sub("", term).lower()


def match_items(items: Sequence[NamedT], term: str) -> list[NamedT]:
    """Keep named items whose lower-cased name contains ``term``, in input order."""
    return [item for item in items if item.name is not None and term in item.name.lower()]


def rank_items(items: Sequence[NamedT]) -> list[NamedT]:
    """Order by name length, shortest first; unnamed items last, ties keep input order."""
    return sorted(items, key=lambda item: (item.name is None, len(item.name or "")))


def truncate_items(items: Sequence[NamedT], max_count: int) -> Truncated[NamedT]:
    return Truncated(items=list(items[:max_count]), was_truncated=len(items) > max_count, total=len(items))


def select_items(items: Sequence[NamedT], term: str, max_count: int) -> Truncated[NamedT]:
    return truncate_items(rank_items(match_items(items, term)), max_count)
