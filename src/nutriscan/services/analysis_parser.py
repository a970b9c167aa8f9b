"""Build typed analysis results from extracted sections."""

import logging
import re
from collections.abc import Iterable

from pydantic import ValidationError

from nutriscan.domain.analysis import AnalysisResult, NutrientEntry
from nutriscan.services.sections import (
    ALLERGENS,
    ANALYSIS_HEADINGS,
    HEALTH_IMPLICATIONS,
    KEY_NUTRIENTS,
    OVERALL_ASSESSMENT,
    SectionMap,
    extract_sections,
)

_logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
_BULLET = re.compile(r"^-?\s*")
_WHITESPACE = re.compile(r"\s+")
# Optional bullet and bold markers, "name: <number> <unit>", optional "(...)".
_NUTRIENT_LINE = re.compile(
    r"-?\s*\*?\*?(.*?)\*?\*?\s*:\s*([0-9]+(?:\.[0-9]+)?)\s*([g%]|mg|mcg|µg)"
    r"(?:\s*\(.*?\))?\s*",
    re.IGNORECASE,
)
_EXCLUDED_NUTRIENTS = {"calories"}


def build_analysis(
    sections: SectionMap, citations: Iterable[str] | None = None
) -> AnalysisResult:
    """Convert a section map into an ``AnalysisResult``.

    Missing or malformed sections degrade to empty fields.
    """
    return AnalysisResult(
        nutrients=tuple(parse_nutrients(sections.get(KEY_NUTRIENTS, ""))),
        health_implications=tuple(
            parse_list_section(sections.get(HEALTH_IMPLICATIONS, ""))
        ),
        allergens=tuple(parse_list_section(sections.get(ALLERGENS, ""))),
        overall_assessment=sections.get(OVERALL_ASSESSMENT, "").strip(),
        citations=tuple(citations or ()),
    )


def parse_analysis(
    text: str, citations: Iterable[str] | None = None
) -> AnalysisResult:
    """Extract sections from an LLM reply and build the typed result."""
    sections = extract_sections(text, ANALYSIS_HEADINGS)
    result = build_analysis(sections, citations)
    _logger.debug(
        "Parsed analysis: nutrients=%s implications=%s allergens=%s",
        len(result.nutrients),
        len(result.health_implications),
        len(result.allergens),
    )
    return result


def parse_nutrients(content: str) -> list[NutrientEntry]:
    """Parse nutrient lines, skipping calories and unparsable lines."""
    nutrients: list[NutrientEntry] = []
    for line in _LINE_BREAK.split(content):
        if not line.strip():
            continue
        entry = parse_nutrient_line(line)
        if entry is None:
            _logger.warning("Could not parse nutrient line: %s", line)
            continue
        if entry.name.casefold() in _EXCLUDED_NUTRIENTS:
            continue
        nutrients.append(entry)
    return nutrients


def parse_nutrient_line(line: str) -> NutrientEntry | None:
    """Parse a single ``name: value unit`` line."""
    match = _NUTRIENT_LINE.search(line)
    if match is None:
        return None
    name, value, unit = match.groups()
    try:
        return NutrientEntry(
            name=_WHITESPACE.sub(" ", name).strip(),
            value=float(value),
            unit=unit,
        )
    except ValidationError:
        return None


def parse_list_section(content: str) -> list[str]:
    """Split a bulleted section into cleaned lines, keeping inline markup."""
    items: list[str] = []
    for line in _LINE_BREAK.split(content):
        cleaned = _BULLET.sub("", line.strip(), count=1)
        if cleaned:
            items.append(cleaned)
    return items
