from typing import Iterable, List

from resume_text.classify import ClassifiedLine, LineTag

def _should_merge(line:ClassifiedLine, prev:str)->bool:
    # headers ending in ":" never absorb the body below them
    return (
        not line.is_structural
        and bool(prev)
        and line.tag is not LineTag.BULLET
        and not prev.endswith(":")
    )

def reconstruct_lines(lines:Iterable[ClassifiedLine])->List[str]:
    """Merge body-continuation lines into the logical line before them."""
    logical = []
    for line in lines:
        prev = logical[-1] if logical else ""
        if _should_merge(line, prev):
            logical[-1] = f"{prev} {line.text}"
        else:
            logical.append(line.text)
    return logical

def join_logical_lines(lines:Iterable[str])->str:
    return "\n".join(lines)
