"""Tests for analysis view building."""

from nutriscan.domain.analysis import AnalysisResult, NutrientEntry
from nutriscan.services.presentation import (
    CHART_PALETTE,
    build_analysis_view,
    build_nutrient_chart,
    is_no_allergen_notice,
    render_bold_markdown,
)


def test_render_bold_markdown_escapes_html() -> None:
    html = render_bold_markdown("**High sodium** <script>")

    assert html == "<strong>High sodium</strong> &lt;script&gt;"


def test_no_allergen_notice_detection() -> None:
    assert is_no_allergen_notice("None explicitly listed in the label text.")
    assert is_no_allergen_notice("NONE EXPLICITLY LISTED")
    assert not is_no_allergen_notice("Peanuts")


def test_chart_is_omitted_without_nutrients() -> None:
    assert build_nutrient_chart(()) is None


def test_chart_labels_values_and_theme() -> None:
    nutrients = tuple(
        NutrientEntry(name=f"N{index}", value=index + 0.5, unit="g")
        for index in range(9)
    )

    chart = build_nutrient_chart(nutrients, theme="dark")

    assert chart is not None
    assert chart.labels[0] == "N0 (0.5g)"
    assert chart.data[8] == 8.5
    assert chart.background_colors[8] == CHART_PALETTE[0]
    assert chart.legend_text_color == "#f1f5f9"


def test_build_analysis_view() -> None:
    analysis = AnalysisResult(
        nutrients=(NutrientEntry(name="Sodium", value=200, unit="mg"),),
        health_implications=("**Salty** snack",),
        allergens=("Peanuts", "None explicitly listed in the label text."),
        overall_assessment="Okay.",
        citations=("https://example.com",),
    )

    view = build_analysis_view(analysis)

    assert view.theme == "light"
    assert view.chart is not None
    assert view.chart.labels == ["Sodium (200mg)"]
    assert view.chart.legend_text_color == "#1F2937"
    assert view.health_implications_html == ["<strong>Salty</strong> snack"]
    assert [badge.alert for badge in view.allergens] == [True, False]
    assert view.citations == ["https://example.com"]
    dumped = view.model_dump(by_alias=True)
    assert "healthImplicationsHtml" in dumped
    assert "legendTextColor" in dumped["chart"]
