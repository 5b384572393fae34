"""Search modal state: an overlay with its own local text field.

The modal is visible only while the caller says so and is closed through the
caller's close action.  Suggestion chips overwrite the local text.  No query
is ever executed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from catalog.content import SEARCH_SUGGESTIONS
from catalog.state import parse_flag

PARAM_OPEN = "open"
PARAM_QUERY = "q"


@dataclass(frozen=True)
class SearchModalState:
    is_open: bool = False
    query: str = ""

    @property
    def suggestions(self) -> tuple[str, ...]:
        return SEARCH_SUGGESTIONS

    def apply_suggestion(self, suggestion: str) -> SearchModalState:
        return replace(self, query=suggestion)

    def close(self) -> SearchModalState:
        return replace(self, is_open=False)

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> SearchModalState:
        return cls(
            is_open=parse_flag(params.get(PARAM_OPEN), False),
            query=params.get(PARAM_QUERY, ""),
        )

    def to_params(self) -> dict[str, str]:
        return {PARAM_OPEN: "1" if self.is_open else "0", PARAM_QUERY: self.query}
