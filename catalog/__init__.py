"""Sales-enablement catalogue: constant content, shell state and section renderers."""

from catalog.content import (
    COMPETITORS,
    MENU_ITEMS,
    PERSONAS,
    PROBLEMS,
    SEARCH_SUGGESTIONS,
    SUCCESS_STORIES,
    CompetitorProfile,
    Persona,
    Problem,
    SuccessStory,
    persona_title,
)
from catalog.search import SearchModalState
from catalog.sections import SectionView, filter_personas, render_section
from catalog.state import DashboardState

__all__ = [
    "COMPETITORS",
    "MENU_ITEMS",
    "PERSONAS",
    "PROBLEMS",
    "SEARCH_SUGGESTIONS",
    "SUCCESS_STORIES",
    "CompetitorProfile",
    "Persona",
    "Problem",
    "SuccessStory",
    "persona_title",
    "SearchModalState",
    "SectionView",
    "filter_personas",
    "render_section",
    "DashboardState",
]
