"""
Line classification for flattened resume text.

Each trimmed, non-empty line gets exactly one tag. Rules are tried in
order and the first match wins, so the table below is the priority order.
The preamble rule is the only one that looks at the line's position.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple


class LineTag(str, Enum):
    BULLET = "bullet-item"
    CAPS_HEADER = "caps-header"
    COLON_HEADER = "colon-header"
    DATE_RANGE = "date-range-start"
    ENTITY_LOCATION = "entity-location-line"
    PREAMBLE = "preamble-line"
    BODY = "body-continuation"


BULLET_GLYPHS = "●•▪▫◦‣⁃"

_BULLET_RE = re.compile(f'^[{BULLET_GLYPHS}]')
# All-caps section titles ("EXPERIENCE", "SKILLS & TOOLS"); long all-caps lines are usually body text
_CAPS_HEADER_RE = re.compile(r'[A-Z\s&]{2,34}')
_DATE_RANGE_RE = re.compile(r'^[A-Z][a-z]+\s+\d{4}\s*[–-]')
_ENTITY_LOCATION_RE = re.compile(r'^[A-Z][A-Za-z\s&]+\([^)]+\)\s+\S')

COLON_HEADER_MAX_LEN = 50
PREAMBLE_LINES = 2


@dataclass(frozen=True)
class ClassifiedLine:
    text: str
    tag: LineTag
    index: int

    @property
    def is_structural(self) -> bool:
        return self.tag is not LineTag.BODY


def is_bullet(text: str, index: int) -> bool:
    return bool(_BULLET_RE.match(text))

def is_caps_header(text: str, index: int) -> bool:
    return bool(_CAPS_HEADER_RE.fullmatch(text))

def is_colon_header(text: str, index: int) -> bool:
    return text.endswith(":") and len(text) < COLON_HEADER_MAX_LEN

def is_date_range(text: str, index: int) -> bool:
    return bool(_DATE_RANGE_RE.match(text))

def is_entity_location(text: str, index: int) -> bool:
    return bool(_ENTITY_LOCATION_RE.match(text))

def is_preamble(text: str, index: int) -> bool:
    return index < PREAMBLE_LINES


RULES: List[Tuple[LineTag, Callable[[str, int], bool]]] = [
    (LineTag.BULLET, is_bullet),
    (LineTag.CAPS_HEADER, is_caps_header),
    (LineTag.COLON_HEADER, is_colon_header),
    (LineTag.DATE_RANGE, is_date_range),
    (LineTag.ENTITY_LOCATION, is_entity_location),
    (LineTag.PREAMBLE, is_preamble),
]


def classify_line(text: str, index: int) -> LineTag:
    for tag, matches in RULES:
        if matches(text, index):
            return tag
    return LineTag.BODY


def split_lines(text: str) -> List[str]:
    """Split on newlines, trim, and drop blank lines."""
    lines = (l.strip() for l in (text or "").split("\n"))
    return [l for l in lines if l]


def classify_lines(text: str) -> List[ClassifiedLine]:
    return [ClassifiedLine(line, classify_line(line, i), i) for i, line in enumerate(split_lines(text))]
