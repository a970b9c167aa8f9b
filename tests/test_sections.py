"""Tests for section extraction."""

from nutriscan.services.sections import (
    ALLERGENS,
    ANALYSIS_HEADINGS,
    HEALTH_IMPLICATIONS,
    KEY_NUTRIENTS,
    OVERALL_ASSESSMENT,
    extract_sections,
)
from tests.conftest import SAMPLE_ANALYSIS_TEXT


def test_extract_sections_returns_all_headings_in_order() -> None:
    sections = extract_sections(SAMPLE_ANALYSIS_TEXT, ANALYSIS_HEADINGS)

    assert list(sections) == list(ANALYSIS_HEADINGS)
    assert sections[KEY_NUTRIENTS].startswith("Total Fat: 10g")
    assert sections[KEY_NUTRIENTS].endswith("Vitamin C: 12.5mg")
    assert sections[ALLERGENS] == "- Peanuts\n- Soy"
    assert sections[OVERALL_ASSESSMENT] == "A salty snack best eaten in moderation."


def test_missing_heading_has_no_entry_and_others_are_unaffected() -> None:
    text = "Key Nutrients:\nSugar: 3g\nAllergens:\n- Milk\nOverall Assessment:\nFine."

    sections = extract_sections(text)

    assert HEALTH_IMPLICATIONS not in sections
    assert sections[KEY_NUTRIENTS] == "Sugar: 3g"
    assert sections[ALLERGENS] == "- Milk"
    assert sections[OVERALL_ASSESSMENT] == "Fine."


def test_empty_text_gives_empty_map() -> None:
    assert extract_sections("") == {}


def test_heading_artifact_is_stripped() -> None:
    text = "Key Nutrients::\n\nIron: 2mg\nHealth Implications:\n- Good"

    sections = extract_sections(text)

    assert sections[KEY_NUTRIENTS] == "Iron: 2mg"


def test_later_heading_inside_body_does_not_truncate_section() -> None:
    text = (
        "Key Nutrients:\nFiber: 4g\n"
        "Health Implications:\n- Mentions Overall Assessment: in passing\n"
        "- Still part of implications\n"
        "Allergens:\n- Wheat\n"
        "Overall Assessment:\nGood source of fiber."
    )

    sections = extract_sections(text)

    assert sections[HEALTH_IMPLICATIONS] == (
        "- Mentions Overall Assessment: in passing\n- Still part of implications"
    )
    assert sections[ALLERGENS] == "- Wheat"
    assert sections[OVERALL_ASSESSMENT] == "Good source of fiber."


def test_next_heading_inside_body_ends_section_early() -> None:
    text = (
        "Key Nutrients:\nFiber: 4g\n"
        "Health Implications:\n- Check Allergens: below\n"
        "- Fiber helps digestion\n"
        "Allergens:\n- Wheat\n"
        "Overall Assessment:\nGood."
    )

    sections = extract_sections(text)

    assert sections[HEALTH_IMPLICATIONS] == "- Check"
    assert sections[ALLERGENS] == (
        "below\n- Fiber helps digestion\nAllergens:\n- Wheat"
    )
    assert sections[OVERALL_ASSESSMENT] == "Good."


def test_heading_before_previous_section_is_not_matched() -> None:
    text = "Allergens:\n- Eggs\nKey Nutrients:\nSugar: 1g"

    sections = extract_sections(text)

    assert ALLERGENS not in sections
    assert sections[KEY_NUTRIENTS] == "Sugar: 1g"


def test_custom_headings() -> None:
    sections = extract_sections("A: one B: two", ["A:", "B:"])

    assert sections == {"A:": "one", "B:": "two"}
