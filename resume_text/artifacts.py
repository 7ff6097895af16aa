import re
from typing import Optional

# "-- 1 of 2 --" markers the PDF text layer inserts between pages
PAGE_SEPARATOR_RE = re.compile(r'--\s*\d+\s+of\s+\d+\s*--')
# C0 controls and DEL, minus \t \n \r
CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
LINE_BREAK_RE = re.compile(r'\r\n|\r')
MULTI_SPACE_RE = re.compile(r' {2,}')

def strip_artifacts(raw:Optional[str])->str:
    """Remove extraction artifacts and normalize whitespace. Order matters."""
    if not raw or not isinstance(raw, str):
        return ""
    s = PAGE_SEPARATOR_RE.sub('', raw)
    s = CONTROL_CHARS_RE.sub('', s)
    s = LINE_BREAK_RE.sub('\n', s)
    s = s.replace('\t', ' ')
    s = MULTI_SPACE_RE.sub(' ', s)
    return s
