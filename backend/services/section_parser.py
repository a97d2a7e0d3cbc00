"""Resume section segmentation and citation placement."""

import re
from collections.abc import Iterator

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|summary|path)",
        r"(?:positions?\s*held|roles)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:technical\s+)?(?:stack|toolkit|tooling)",
        r"(?:programming\s+)?languages",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

# Compile all patterns into a single regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE
    )

HEADER_SECTION = "header"

# Citation used when a span falls outside any recognised section
DEFAULT_LOCATION = ("skills", 0)


def match_heading(line: str) -> str | None:
    """Return the canonical section name if line is a section heading."""
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _COMPILED.items():
        if pattern.match(stripped):
            return section_name
    return None


def _iter_lines(text: str) -> Iterator[tuple[int, str, str | None]]:
    """Yield (offset, line, heading) for every line of text."""
    offset = 0
    for line in text.split("\n"):
        yield offset, line, match_heading(line)
        offset += len(line) + 1


def locate_section(text: str, offset: int) -> tuple[str, int]:
    """Resolve a character offset to (section name, line index in section).

    The index counts the non-empty content lines of the section that
    precede the line holding the offset. Offsets above the first
    heading, or past the end of text, resolve to DEFAULT_LOCATION.
    """
    current_section = HEADER_SECTION
    index = 0

    for line_start, line, heading in _iter_lines(text):
        line_end = line_start + len(line)
        if heading:
            current_section = heading
            index = 0
            if line_start <= offset <= line_end:
                return current_section, 0
            continue
        if line_start <= offset <= line_end:
            if current_section == HEADER_SECTION:
                return DEFAULT_LOCATION
            return current_section, index
        if line.strip():
            index += 1

    return DEFAULT_LOCATION
