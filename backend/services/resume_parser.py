"""Resume bullet extraction from plain text."""

import re

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

_NUMBERED_RE = re.compile(r"^\d{1,2}[.)]\s")


def extract_bullets(text: str) -> list[str]:
    """Extract bullet-point lines from resume text, markers stripped."""
    bullets = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        # Match lines starting with bullet markers
        if stripped[0] in BULLET_MARKERS:
            cleaned = stripped.lstrip("".join(BULLET_MARKERS) + " ").strip()
            if cleaned:
                bullets.append(cleaned)
        # Numbered bullets: "1.", "12.", "1)", "12)"
        elif _NUMBERED_RE.match(stripped):
            cleaned = re.sub(r"^\d{1,2}[.)]\s*", "", stripped).strip()
            if cleaned:
                bullets.append(cleaned)
    return bullets
