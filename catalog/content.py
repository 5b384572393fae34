"""
Sales-enablement reference content.

Everything in this module is constant: personas, problems, success stories,
competitor profiles, and the handful of presentation lists the dashboard
shell needs (menu, KPI cards, quick actions, industries, search suggestions).

Nothing here is created, updated or deleted at runtime.  Problems reference
personas by id; the reference is not enforced, so a problem pointing at an
unknown persona simply renders a blank label (see ``persona_title``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

Severity = Literal["critical", "high"]
SEVERITIES: tuple[str, ...] = get_args(Severity)


# ── Entities ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Persona:
    """A buyer or stakeholder role used to segment sales messaging."""

    id: str
    title: str
    department: str
    responsibilities: tuple[str, ...]


@dataclass(frozen=True)
class Problem:
    """A pain point with severity, affected personas and a solution narrative."""

    id: str
    title: str
    severity: Severity
    affected_personas: tuple[str, ...]  # Persona.id values
    description: str
    metrics: tuple[str, ...]
    solution: str
    impact: str


@dataclass(frozen=True)
class SuccessStory:
    company: str
    problem: str                        # Problem.id
    outcome: str
    savings: str
    testimonial: str


@dataclass(frozen=True)
class CompetitorProfile:
    name: str
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    differentiators: tuple[str, ...]


# ── Presentation constants ────────────────────────────────────────────────────


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    icon: str


@dataclass(frozen=True)
class StatCard:
    value: str
    label: str
    caption: str
    trend: str
    icon: str
    tone: str


@dataclass(frozen=True)
class QuickAction:
    label: str
    icon: str
    tone: str


MENU_ITEMS: tuple[MenuItem, ...] = (
    MenuItem("dashboard",   "Dashboard",              "home"),
    MenuItem("icp",         "Ideal Customer Profile", "users"),
    MenuItem("problems",    "Problems & Pain Points", "alert-circle"),
    MenuItem("impact",      "Business Impact",        "trending-up"),
    MenuItem("metrics",     "KPIs & Metrics",         "bar-chart"),
    MenuItem("scripts",     "Sales Scripts",          "message-square"),
    MenuItem("stories",     "Success Stories",        "trophy"),
    MenuItem("technical",   "Technical Deep Dive",    "briefcase"),
    MenuItem("competitors", "Competitive Intel",      "shield"),
    MenuItem("resources",   "Resources",              "book-open"),
)

STAT_CARDS: tuple[StatCard, ...] = (
    StatCard("$2.4M", "Average Cost Savings", "This Month",
             "62% reduction", "dollar-sign", "green"),
    StatCard("847", "Enterprise Customers", "Active",
             "23% growth QoQ", "users", "blue"),
    StatCard("94%", "Win Rate vs Competition", "Current",
             "Industry leader", "trophy", "yellow"),
)

QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction("View Problem Matrix",  "alert-circle",   "red"),
    QuickAction("Access Sales Scripts", "message-square", "blue"),
    QuickAction("Success Stories",      "trophy",         "yellow"),
    QuickAction("ROI Calculator",       "bar-chart",      "green"),
)

TARGET_INDUSTRIES: tuple[str, ...] = (
    "Financial Services",
    "Healthcare",
    "Manufacturing",
    "Technology",
    "Retail",
    "Government",
    "Education",
    "MSPs",
)

SEARCH_SUGGESTIONS: tuple[str, ...] = (
    "Azure costs",
    "CIO persona",
    "Success stories",
    "Competition",
)


# ── Catalogue ─────────────────────────────────────────────────────────────────

PERSONAS: tuple[Persona, ...] = (
    Persona("cio", "CIO", "Executive",
            ("Strategic IT planning", "Budget management", "Board reporting")),
    Persona("it_director", "Director of IT", "Operations",
            ("Daily operations", "Cost control", "Service stability")),
    Persona("cloud_engineer", "Director of Cloud Engineering", "Technical",
            ("Auto-scaling", "Reserved instances", "Architecture")),
    Persona("vp_finance", "VP of Finance", "Finance",
            ("Forecasting", "Budget planning", "Cost analysis")),
    Persona("msp_ceo", "CEO/President (MSP)", "MSP Leadership",
            ("Profitability", "Client retention", "Service margins")),
)

PROBLEMS: tuple[Problem, ...] = (
    Problem(
        id="azure_costs",
        title="Uncontrolled Azure Compute and Storage Costs",
        severity="critical",
        affected_personas=("cio", "it_director", "vp_finance", "msp_ceo"),
        description=(
            "Enterprises consuming more Azure resources than required, "
            "leading to unpredictable spikes and budget overruns"
        ),
        metrics=("Monthly Azure spend per user", "Budget variance",
                 "VM utilization rate"),
        solution=(
            "Automated scaling, rightsizing recommendations, cost modeling, "
            "and real-time dashboards"
        ),
        impact="40-75% reduction in Azure compute and storage costs",
    ),
    Problem(
        id="vm_performance",
        title="Poor VM Performance & User Experience",
        severity="high",
        affected_personas=("it_director", "cloud_engineer"),
        description=(
            "Inadequate VM sizing and configuration leading to slow "
            "performance and user complaints"
        ),
        metrics=("User satisfaction scores", "Ticket volume",
                 "Session performance"),
        solution="Dynamic performance optimization and automated resource allocation",
        impact="60% reduction in performance-related tickets",
    ),
    Problem(
        id="security_compliance",
        title="Security & Compliance Gaps",
        severity="critical",
        affected_personas=("cio", "it_director"),
        description=(
            "Difficulty maintaining consistent security policies across "
            "Azure environments"
        ),
        metrics=("Compliance audit scores", "Security incidents",
                 "Policy violations"),
        solution="Automated security policies and compliance monitoring",
        impact="95% compliance achievement rate",
    ),
)

SUCCESS_STORIES: tuple[SuccessStory, ...] = (
    SuccessStory(
        company="Fortune 500 Financial Services",
        problem="azure_costs",
        outcome="Reduced Azure costs by 62% in 3 months",
        savings="$2.4M annually",
        testimonial="Nerdio transformed our Azure cost management completely",
    ),
    SuccessStory(
        company="Global Healthcare Provider",
        problem="vm_performance",
        outcome="Improved VDI performance by 3x",
        savings="$800K in productivity gains",
        testimonial="User satisfaction scores increased from 3.2 to 4.8",
    ),
    SuccessStory(
        company="Leading MSP",
        problem="azure_costs",
        outcome="Increased margins by 35%",
        savings="$1.2M additional profit",
        testimonial="We can now confidently quote Azure projects",
    ),
)

COMPETITORS: tuple[CompetitorProfile, ...] = (
    CompetitorProfile(
        name="Competitor A",
        strengths=("Market presence", "Brand recognition"),
        weaknesses=("Limited automation", "Complex pricing", "Poor MSP support"),
        differentiators=("Nerdio: 75% more cost savings", "Unified platform",
                         "MSP-ready"),
    ),
    CompetitorProfile(
        name="Competitor B",
        strengths=("Feature rich", "Enterprise focus"),
        weaknesses=("Expensive", "Steep learning curve", "No auto-scaling"),
        differentiators=("Nerdio: 50% faster deployment", "Intuitive UI",
                         "Built-in optimization"),
    ),
)


# ── Lookups ───────────────────────────────────────────────────────────────────


def persona_title(persona_id: str, personas: tuple[Persona, ...] = PERSONAS) -> str:
    """Return the title for *persona_id*, or ``""`` for a dangling reference."""
    for persona in personas:
        if persona.id == persona_id:
            return persona.title
    return ""


def menu_label(section: str) -> str | None:
    """Return the menu label for *section*, or None if it is not a menu entry."""
    for item in MENU_ITEMS:
        if item.id == section:
            return item.label
    return None
