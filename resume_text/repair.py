import re

from resume_text.classify import BULLET_GLYPHS

PUNCT = '.,;:!?'

# whitespace before a mark, unless another mark precedes it (that gap is the next rule's)
_SPACE_BEFORE_PUNCT_RE = re.compile(rf'(?<=[^\s{PUNCT}])\s+(?=[{PUNCT}])')
_ADJACENT_PUNCT_RE = re.compile(rf'([{PUNCT}])\s*(?=[{PUNCT}])')
_PIPE_RE = re.compile(r'\s*\|\s*')
_WORD_HYPHEN_RE = re.compile(r'(?<=\w)\s*-\s*(?=\w)')
_YEAR_RANGE_RE = re.compile(r'(?<=\d{4})\s*-\s*(?=\d{4})')
# a run of at-signs is one match: "a @ @ b" -> "a@@b"
_EMAIL_AT_RE = re.compile(r'(?<=\S)\s*@(?:\s*@)*\s*(?=\S)')
_ALT_BULLET_RE = re.compile(f'[{BULLET_GLYPHS.replace("●", "")}]')
_BLANK_RUN_RE = re.compile(r'\n{3,}')

def repair_punctuation(text:str)->str:
    """Fix spacing artifacts left by line flattening. Idempotent."""
    if not text:
        return ""
    s = _SPACE_BEFORE_PUNCT_RE.sub('', text)
    s = _ADJACENT_PUNCT_RE.sub(r'\1 ', s)
    s = _PIPE_RE.sub(' | ', s)
    # "full - time" -> "full-time", then year ranges get their spaces back
    s = _WORD_HYPHEN_RE.sub('-', s)
    s = _YEAR_RANGE_RE.sub(' - ', s)
    s = _EMAIL_AT_RE.sub(lambda m: '@' * m.group().count('@'), s)
    s = _ALT_BULLET_RE.sub('●', s)
    s = _BLANK_RUN_RE.sub('\n\n', s)
    return s.strip()
