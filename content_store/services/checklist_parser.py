import logging
import re

from content_store.schemas.checklist import (
    ChecklistDocument,
    ChecklistItem,
    ChecklistSection,
)

logger = logging.getLogger(__name__)

_HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$")
_TASK_PATTERN = re.compile(r"^\s*[-*+]\s+\[([ xX])\]\s+(.*\S)\s*$")

_EMOJI_RANGES = (
    (0x1F1E6, 0x1F1FF),  # flags
    (0x1F300, 0x1F5FF),  # symbols & pictographs
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F680, 0x1F6FF),  # transport & map
    (0x1F900, 0x1F9FF),  # supplemental symbols
    (0x1FA70, 0x1FAFF),  # pictographs ext
    (0x1F3FB, 0x1F3FF),  # skin tone modifiers
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats (includes the check marks)
    (0x2B00, 0x2BFF),  # arrows, stars
    (0xFE00, 0xFE0F),  # variation selectors
)


def _is_emoji_char(ch: str) -> bool:
    cp = ord(ch)
    if cp == 0x200D:  # zero width joiner
        return True
    return any(start <= cp <= end for start, end in _EMOJI_RANGES)


def normalize_heading(text: str) -> str:
    """Strip emoji-like glyphs and collapse whitespace."""

    cleaned = "".join(ch for ch in text if not _is_emoji_char(ch))
    collapsed = " ".join(cleaned.split())
    return collapsed.strip()


def parse_checklist(text: str) -> ChecklistDocument:
    """Group `- [x]` / `- [ ]` task lines under their nearest heading."""

    sections = [ChecklistSection()]
    in_fence = False

    for line in (text or "").splitlines():
        if line.lstrip().startswith(("```", "~~~")):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        heading = _HEADING_PATTERN.match(line)
        if heading:
            raw_title = heading.group(2)
            sections.append(
                ChecklistSection(
                    title=normalize_heading(raw_title) or raw_title,
                    level=len(heading.group(1)),
                )
            )
            continue

        task = _TASK_PATTERN.match(line)
        if task:
            sections[-1].items.append(
                ChecklistItem(text=task.group(2), done=task.group(1) != " ")
            )

    # Drop the implicit leading section when nothing preceded the first heading
    if not sections[0].items:
        sections = sections[1:]

    document = ChecklistDocument(sections=sections)
    logger.debug(
        f"Parsed checklist: {document.completed}/{document.total} items complete"
    )
    return document
