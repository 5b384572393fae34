"""
Section renderers for the dashboard shell.

Each renderer is a pure function of the constant catalogue (and, for the
persona directory and problem catalogue, of the current ``DashboardState``).
It returns a ``SectionView``: the template to render plus its context.
Renderers never mutate the catalogue.

Sections:
    dashboard    → KPI cards, quick actions, top problems, recent wins
    icp          → persona directory with a single-field persona filter
    problems     → problem catalogue with single-selection accordion
    stories      → customer success stories
    competitors  → competitive intelligence
    (anything else) → "Section Under Construction" placeholder
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from catalog.content import (
    COMPETITORS,
    PERSONAS,
    PROBLEMS,
    QUICK_ACTIONS,
    STAT_CARDS,
    SUCCESS_STORIES,
    TARGET_INDUSTRIES,
    Persona,
    Problem,
    menu_label,
    persona_title,
)
from catalog.state import ALL_PERSONAS, DashboardState

PLACEHOLDER_TEMPLATE = "partials/sections/placeholder.html"

# Number of problems / stories summarised on the dashboard overview.
_OVERVIEW_LIMIT = 3


@dataclass(frozen=True)
class SectionView:
    template: str
    context: dict[str, Any] = field(default_factory=dict)


# ── Pure helpers ──────────────────────────────────────────────────────────────


def filter_personas(
    personas: tuple[Persona, ...], persona_filter: str
) -> list[Persona]:
    """Return every persona for ``"all"``, otherwise the exact id matches."""
    if persona_filter == ALL_PERSONAS:
        return list(personas)
    return [p for p in personas if p.id == persona_filter]


def problem_row(problem: Problem, state: DashboardState) -> dict[str, Any]:
    """Build the view model for one row of the problem catalogue."""
    return {
        "problem": problem,
        "persona_titles": [persona_title(pid) for pid in problem.affected_personas],
        "is_expanded": state.expanded_problem == problem.id,
        "next_state": state.toggle_problem(problem.id),
    }


# ── Renderers ─────────────────────────────────────────────────────────────────


def render_dashboard(state: DashboardState) -> SectionView:
    return SectionView(
        "partials/sections/dashboard.html",
        {
            "stat_cards":    STAT_CARDS,
            "quick_actions": QUICK_ACTIONS,
            "top_problems":  PROBLEMS[:_OVERVIEW_LIMIT],
            "recent_wins":   SUCCESS_STORIES[:_OVERVIEW_LIMIT],
        },
    )


def render_personas(state: DashboardState) -> SectionView:
    options = [{"value": ALL_PERSONAS, "label": "All Personas"}]
    options += [{"value": p.id, "label": p.title} for p in PERSONAS]
    return SectionView(
        "partials/sections/personas.html",
        {
            "personas":       filter_personas(PERSONAS, state.persona_filter),
            "persona_filter": state.persona_filter,
            "persona_options": options,
            "industries":     TARGET_INDUSTRIES,
        },
    )


def render_problems(state: DashboardState) -> SectionView:
    return SectionView(
        "partials/sections/problems.html",
        {"rows": [problem_row(p, state) for p in PROBLEMS]},
    )


def render_stories(state: DashboardState) -> SectionView:
    return SectionView(
        "partials/sections/stories.html",
        {"stories": SUCCESS_STORIES},
    )


def render_competitors(state: DashboardState) -> SectionView:
    return SectionView(
        "partials/sections/competitors.html",
        {"competitors": COMPETITORS},
    )


def render_placeholder(state: DashboardState) -> SectionView:
    return SectionView(
        PLACEHOLDER_TEMPLATE,
        {"section_label": menu_label(state.section) or state.section},
    )


SECTION_RENDERERS: dict[str, Callable[[DashboardState], SectionView]] = {
    "dashboard":   render_dashboard,
    "icp":         render_personas,
    "problems":    render_problems,
    "stories":     render_stories,
    "competitors": render_competitors,
}


def render_section(state: DashboardState) -> SectionView:
    """Dispatch on ``state.section``; unrecognised values get the placeholder."""
    renderer = SECTION_RENDERERS.get(state.section, render_placeholder)
    return renderer(state)
