import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

CONTENT_SUFFIX = ".md"


class FileContentRepo:
    """Read-only view over a directory of Markdown posts."""

    def __init__(self, root, checklist_path=None):
        self.root = Path(root)
        self.checklist_path = Path(checklist_path) if checklist_path else None

    def list_content_files(self) -> List[Path]:
        if not self.root.is_dir():
            logger.warning(f"Content directory {self.root} does not exist")
            return []
        return sorted(
            path
            for path in self.root.rglob(f"*{CONTENT_SUFFIX}")
            if self._is_valid(path)
        )

    def read_text(self, path) -> str:
        # utf-8-sig drops a BOM that would hide the opening '---'
        return Path(path).read_text(encoding="utf-8-sig")

    def read_checklist(self) -> Optional[str]:
        if self.checklist_path is None or not self.checklist_path.is_file():
            return None
        return self.read_text(self.checklist_path)

    def slug_for(self, path) -> str:
        relative = Path(path).relative_to(self.root)
        return relative.with_suffix("").as_posix()

    def _is_valid(self, path: Path) -> bool:
        if not path.is_file() or path.suffix != CONTENT_SUFFIX:
            return False
        if any(part.startswith(".") for part in path.relative_to(self.root).parts):
            return False
        if self.checklist_path is not None and self._same_file(
            path, self.checklist_path
        ):
            return False
        return True

    @staticmethod
    def _same_file(a: Path, b: Path) -> bool:
        try:
            return a.resolve() == b.resolve()
        except OSError:
            return False
