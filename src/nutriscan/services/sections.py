"""Split heading-delimited LLM replies into sections."""

from collections.abc import Sequence

KEY_NUTRIENTS = "Key Nutrients:"
HEALTH_IMPLICATIONS = "Health Implications:"
ALLERGENS = "Allergens:"
OVERALL_ASSESSMENT = "Overall Assessment:"

ANALYSIS_HEADINGS: tuple[str, ...] = (
    KEY_NUTRIENTS,
    HEALTH_IMPLICATIONS,
    ALLERGENS,
    OVERALL_ASSESSMENT,
)

_HEADING_ARTIFACT = ":\n\n"

SectionMap = dict[str, str]


def extract_sections(
    text: str, headings: Sequence[str] = ANALYSIS_HEADINGS
) -> SectionMap:
    """Return the content that follows each heading, keyed by heading.

    Headings are searched strictly in the given order, each one starting
    where the previous section ended. A heading that is missing (or that
    only appears before the previous section) gets no entry, and the next
    search still starts from the last successful match.

    A section ends at the following heading; when that heading is absent
    the next one in order is used instead, then end-of-text.
    """
    sections: SectionMap = {}
    cursor = 0
    for index, heading in enumerate(headings):
        start = text.find(heading, cursor)
        if start == -1:
            continue
        content_start = start + len(heading)
        content_end = _section_end(text, headings[index + 1 :], content_start)
        sections[heading] = _clean_section(text[content_start:content_end])
        cursor = content_end
    return sections


def _section_end(text: str, following: Sequence[str], content_start: int) -> int:
    """Offset of the first following heading found after ``content_start``."""
    for heading in following:
        position = text.find(heading, content_start)
        if position != -1:
            return position
    return len(text)


def _clean_section(raw: str) -> str:
    """Trim a section and drop a leaked ``:\\n\\n`` heading marker."""
    content = raw.strip()
    if content.startswith(_HEADING_ARTIFACT):
        content = content[len(_HEADING_ARTIFACT) :].strip()
    return content
