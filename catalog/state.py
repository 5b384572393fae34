"""
Dashboard shell state.

``DashboardState`` holds the transient UI selection for one rendering of the
hub: active section, header search text, sidebar visibility, the single
expanded problem and the persona filter.  It is never stored server-side;
each HTMX interaction sends the complete state back as query parameters and
receives the re-rendered shell.  Loading ``/`` therefore always starts from
the defaults below.

Transitions return a new state and leave the original untouched.  None of
them can fail: unknown sections render a placeholder, unknown persona ids
filter to an empty list, and unparseable parameters fall back to defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

DEFAULT_SECTION = "dashboard"
ALL_PERSONAS = "all"

# Query parameter names used by the templates and /partials/shell.
PARAM_SECTION = "section"
PARAM_SEARCH = "q"
PARAM_SIDEBAR = "sidebar"
PARAM_EXPANDED = "expanded"
PARAM_PERSONA = "persona"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_flag(raw: str | None, default: bool) -> bool:
    """Interpret a query-string boolean, returning *default* when unparseable."""
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class DashboardState:
    section: str = DEFAULT_SECTION
    search_query: str = ""
    sidebar_open: bool = True
    expanded_problem: str | None = None
    persona_filter: str = ALL_PERSONAS

    # ── Transitions ───────────────────────────────────────────────────────

    def select_section(self, section: str) -> DashboardState:
        return replace(self, section=section)

    def toggle_sidebar(self) -> DashboardState:
        return replace(self, sidebar_open=not self.sidebar_open)

    def toggle_problem(self, problem_id: str) -> DashboardState:
        """Accordion toggle: expand *problem_id*, or collapse it if already open."""
        if self.expanded_problem == problem_id:
            return replace(self, expanded_problem=None)
        return replace(self, expanded_problem=problem_id)

    def select_persona(self, persona_filter: str) -> DashboardState:
        return replace(self, persona_filter=persona_filter)

    def set_search(self, text: str) -> DashboardState:
        # Captured and echoed back only; nothing is filtered by it.
        return replace(self, search_query=text)

    # ── Request parameter round-trip ──────────────────────────────────────

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> DashboardState:
        """Build a state from request query parameters.

        Missing or empty values fall back to the defaults.  The search text
        is the one exception: an empty string is a legitimate value and is
        kept as-is.
        """
        default = cls()
        section = params.get(PARAM_SECTION) or default.section
        persona = params.get(PARAM_PERSONA) or default.persona_filter
        expanded = params.get(PARAM_EXPANDED) or None
        return cls(
            section=section,
            search_query=params.get(PARAM_SEARCH, default.search_query),
            sidebar_open=parse_flag(params.get(PARAM_SIDEBAR), default.sidebar_open),
            expanded_problem=expanded,
            persona_filter=persona,
        )

    def to_params(self, exclude: Iterable[str] = ()) -> dict[str, str]:
        """Serialise to flat string parameters (``hx-vals`` / query string).

        Args:
            exclude: Parameter names to omit, typically the one owned by the
                form control that triggers the request.
        """
        params = {
            PARAM_SECTION:  self.section,
            PARAM_SEARCH:   self.search_query,
            PARAM_SIDEBAR:  "1" if self.sidebar_open else "0",
            PARAM_EXPANDED: self.expanded_problem or "",
            PARAM_PERSONA:  self.persona_filter,
        }
        skip = set(exclude)
        return {k: v for k, v in params.items() if k not in skip}
