import logging
from typing import List

logger = logging.getLogger(__name__)


def build_report(store) -> List[str]:
    """One line per rejected post, plus checklist progress when available."""
    lines = [
        f"ERROR {slug}: {error.field}: {error.reason}"
        for slug, error in sorted(store.errors().items())
    ]

    published = list(store.list_published())
    drafts = sum(1 for doc in store.documents() if doc.draft)
    rejected = len(lines)
    lines.append(f"{len(published)} published, {drafts} drafts, {rejected} rejected")

    checklist = store.checklist()
    if checklist is not None:
        lines.append(
            f"Checklist: {checklist.completed}/{checklist.total} complete "
            f"({checklist.progress:.0%})"
        )
    return lines


def run_checks(store, out=print) -> int:
    """Emit the report; exit status is 1 when any post was rejected."""
    for line in build_report(store):
        out(line)
    if store.errors():
        logger.warning("Content check failed")
        return 1
    return 0
