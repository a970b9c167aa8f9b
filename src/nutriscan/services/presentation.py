"""View models for rendering an analysis."""

import html
import re
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from nutriscan.domain.analysis import AnalysisResult, NutrientEntry

Theme = Literal["light", "dark"]

CHART_PALETTE: tuple[str, ...] = (
    "#10B981",
    "#3B82F6",
    "#8B5CF6",
    "#EC4899",
    "#F59E0B",
    "#EF4444",
    "#6366F1",
    "#14B8A6",
)
_LEGEND_TEXT_COLORS: dict[str, str] = {"light": "#1F2937", "dark": "#f1f5f9"}
_NO_ALLERGENS_MARKER = "none explicitly listed"
_BOLD = re.compile(r"\*\*(.*?)\*\*")


class _ViewModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutrientChart(_ViewModel):
    """Pie chart data for the nutrient breakdown."""

    labels: list[str]
    data: list[float]
    background_colors: list[str]
    legend_text_color: str


class AllergenBadge(_ViewModel):
    """Allergen label with its alert styling flag."""

    text: str
    alert: bool


class AnalysisView(_ViewModel):
    """Render-ready representation of an ``AnalysisResult``."""

    theme: Theme
    chart: NutrientChart | None
    health_implications_html: list[str]
    allergens: list[AllergenBadge]
    overall_assessment: str
    citations: list[str]


def render_bold_markdown(text: str) -> str:
    """Escape text and turn ``**bold**`` spans into ``<strong>`` tags."""
    return _BOLD.sub(r"<strong>\1</strong>", html.escape(text, quote=False))


def is_no_allergen_notice(allergen: str) -> bool:
    """Return True when the entry says no allergens are listed."""
    return _NO_ALLERGENS_MARKER in allergen.lower()


def nutrient_label(nutrient: NutrientEntry) -> str:
    """Chart label such as ``Sodium (200mg)``."""
    return f"{nutrient.name} ({nutrient.amount})"


def build_nutrient_chart(
    nutrients: tuple[NutrientEntry, ...], theme: Theme = "light"
) -> NutrientChart | None:
    """Build pie chart data, or None when there is nothing to chart."""
    if not nutrients:
        return None
    return NutrientChart(
        labels=[nutrient_label(nutrient) for nutrient in nutrients],
        data=[nutrient.value for nutrient in nutrients],
        background_colors=[
            CHART_PALETTE[index % len(CHART_PALETTE)]
            for index in range(len(nutrients))
        ],
        legend_text_color=_LEGEND_TEXT_COLORS[theme],
    )


def build_analysis_view(
    analysis: AnalysisResult, theme: Theme = "light"
) -> AnalysisView:
    """Prepare an analysis for display with an explicit theme."""
    return AnalysisView(
        theme=theme,
        chart=build_nutrient_chart(analysis.nutrients, theme),
        health_implications_html=[
            render_bold_markdown(item) for item in analysis.health_implications
        ],
        allergens=[
            AllergenBadge(text=item, alert=not is_no_allergen_notice(item))
            for item in analysis.allergens
        ],
        overall_assessment=analysis.overall_assessment,
        citations=list(analysis.citations),
    )
