"""
Static content for the attribution guide: modeling approach registry, stat
cards, playbook insights, journey flow and chart constants.

Every figure here is illustrative. Objects are frozen and validated at import
time so malformed content fails fast instead of rendering a broken page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class ScoreEntry:
    label: str
    percent: int

    def __post_init__(self) -> None:
        if isinstance(self.percent, bool) or not isinstance(self.percent, int):
            raise ValueError(f"Score '{self.label}' must be an integer percentage, got {self.percent!r}")
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Score '{self.label}' must be within 0-100, got {self.percent}")


@dataclass(frozen=True)
class TabEntry:
    id: str
    title: str
    description: str
    scores: Tuple[ScoreEntry, ...]


class ContentRegistry:
    """Ordered, read-only mapping of tab identifier to its display entry."""

    def __init__(self, entries: Iterable[TabEntry]):
        ordered: Dict[str, TabEntry] = {}
        for entry in entries:
            if entry.id in ordered:
                raise ValueError(f"Duplicate tab identifier: {entry.id}")
            ordered[entry.id] = entry
        if not ordered:
            raise ValueError("ContentRegistry needs at least one entry")
        self._entries = ordered

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[TabEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> List[str]:
        return list(self._entries)

    def get(self, key: str) -> Optional[TabEntry]:
        return self._entries.get(key)

    @property
    def default_id(self) -> str:
        return next(iter(self._entries))


def _scores(accuracy: int, complexity: int, data_needs: int) -> Tuple[ScoreEntry, ...]:
    return (
        ScoreEntry("Accuracy", accuracy),
        ScoreEntry("Complexity", complexity),
        ScoreEntry("Data Needs", data_needs),
    )


MODEL_REGISTRY = ContentRegistry(
    [
        TabEntry(
            id="first-order",
            title="First-Order Markov",
            description=(
                "Robust, scalable, and interpretable. Assumes the next step only "
                "depends on the current one."
            ),
            scores=_scores(60, 30, 50),
        ),
        TabEntry(
            id="higher-order",
            title="Higher-Order Markov",
            description=(
                "More sequence-aware but requires more data and is more complex "
                "to implement."
            ),
            scores=_scores(75, 60, 70),
        ),
        TabEntry(
            id="rnn",
            title="RNN / LSTM",
            description=(
                "Highest potential accuracy by reading the entire journey. Very "
                "computationally heavy and requires massive data."
            ),
            scores=_scores(90, 95, 95),
        ),
    ]
)


# --- Header -----------------------------------------------------------------

PAGE_HEADLINE = "The Art of Attribution: From Data to Decisions"
PAGE_SUBTITLE = (
    "An interactive guide for business leaders on transforming complex "
    "multi-touch attribution data into clear, actionable strategy."
)


# --- "So What?" stats -------------------------------------------------------

@dataclass(frozen=True)
class StatFigure:
    label: str
    description: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    currency: Optional[str] = None
    decimals: int = 1


HEADLINE_STATS: Tuple[StatFigure, ...] = (
    StatFigure(
        label="Analyzed Journeys",
        value=1_200_000,
        description="to uncover hidden patterns in customer behavior.",
    ),
    StatFigure(
        label="Top Performing Channel",
        value_display="Sales Calls",
        description="emerged as the most powerful closing touchpoint.",
    ),
    StatFigure(
        label="Attributed Revenue",
        value=4_500_000,
        currency="$",
        description="quantified and assigned to specific marketing efforts.",
    ),
)


# --- 3-act story -------------------------------------------------------------

POWER_VALUE_HEADING = "Act 1 & 2: Power vs. Value"
POWER_VALUE_COPY = (
    "Start by showing the model's \"Power Ranking\" (overall channel importance) "
    "and immediately translate it into the \"Value Ranking\" (attributed revenue). "
    "This connects abstract weights to tangible business impact."
)
JOURNEY_HEADING = "Act 3: The \"Why\" Behind the Data"
JOURNEY_COPY = (
    "Use a flow diagram to illustrate *how* customers move between channels. "
    "This narrative context explains why a channel is valuable, revealing its "
    "role as an opener, nurturer, or closer."
)


@dataclass(frozen=True)
class JourneyStep:
    channel: str
    role: str

    @property
    def label(self) -> str:
        return f"{self.channel} ({self.role})"


JOURNEY_TITLE = "Example Customer Journey Flow"
JOURNEY_STEPS: Tuple[JourneyStep, ...] = (
    JourneyStep("Social", "Opener"),
    JourneyStep("Web", "Nurturer"),
    JourneyStep("Sales Call", "Closer"),
)
JOURNEY_CAPTION = "This path shows how upper-funnel activities effectively generate leads for sales."


@dataclass(frozen=True)
class ChartSeries:
    name: str
    values: Tuple[float, ...]
    fill_color: str
    line_color: str


@dataclass(frozen=True)
class GroupedBarData:
    categories: Tuple[str, ...]
    series: Tuple[ChartSeries, ...]

    def __post_init__(self) -> None:
        for item in self.series:
            if len(item.values) != len(self.categories):
                raise ValueError(
                    f"Series '{item.name}' has {len(item.values)} values for "
                    f"{len(self.categories)} categories"
                )


POWER_VALUE_CHART = GroupedBarData(
    categories=("Sales Call", "Email", "Webcast", "Web", "Tools"),
    series=(
        ChartSeries(
            name="Attribution Weight (%)",
            values=(45, 35, 12, 6, 2),
            fill_color="#ADE8F4",
            line_color="#00B4D8",
        ),
        ChartSeries(
            name="Attributed Revenue ($k)",
            values=(350, 155, 95, 40, 15),
            fill_color="#0077B6",
            line_color="#023E8A",
        ),
    ),
)


# --- Playbook ----------------------------------------------------------------

@dataclass(frozen=True)
class PlaybookInsight:
    key: str
    title: str
    recommendation: str


PLAYBOOK_INSIGHTS: Tuple[PlaybookInsight, ...] = (
    PlaybookInsight(
        key="display-low-attribution",
        title="Insight: 'Display' ads have low attribution.",
        recommendation=(
            "Re-evaluate the Q3 budget for Display. Propose a test to re-allocate "
            "50% of the spend to 'Paid Search' to measure the impact on lead "
            "quality and conversion rate."
        ),
    ),
    PlaybookInsight(
        key="email-top-performer",
        title="Insight: 'Email' is a top-performing channel.",
        recommendation=(
            "Double down on email effectiveness. Launch an A/B test on the cart "
            "abandonment sequence to increase recovery rate and develop two new "
            "promotional campaigns targeting high-value customer segments."
        ),
    ),
)


# --- Footer --------------------------------------------------------------------

KEY_CONSIDERATIONS: Tuple[str, ...] = (
    "Be honest about model limitations",
    "Correlation is not causation",
    "Use as a guide for strategic testing",
)
