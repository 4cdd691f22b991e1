import logging
from collections import Counter
from typing import Dict, Iterator, List, Optional

from content_store.exceptions import ValidationError
from content_store.schemas.checklist import ChecklistDocument
from content_store.schemas.content import ContentDocument
from content_store.services import validator
from content_store.services.checklist_parser import parse_checklist
from content_store.services.content_parser import ContentParser, parse_document

logger = logging.getLogger(__name__)


def listing_order(documents) -> List[ContentDocument]:
    """Newest publishDate first; equal dates fall back to title ascending."""
    by_title = sorted(documents, key=lambda doc: doc.title)
    return sorted(by_title, key=lambda doc: doc.publishDate, reverse=True)


class ContentStore:
    def __init__(
        self,
        repo,
        parser=None,
        *,
        allowed_categories=None,
        words_per_minute: int = 200,
    ):
        self.repo = repo
        self.parser = parser or ContentParser(repo)
        self.allowed_categories = frozenset(allowed_categories or ())
        self.words_per_minute = words_per_minute
        self._documents: Optional[List[ContentDocument]] = None
        self._errors: Dict[str, ValidationError] = {}

    def load(self) -> None:
        """Read every post once; later calls reuse the loaded set."""
        if self._documents is None:
            self.reload()

    def reload(self) -> None:
        documents = []
        errors = {}
        for path in self.repo.list_content_files():
            slug = self.repo.slug_for(path)
            try:
                documents.append(self._load_document(path, slug))
            except ValidationError as e:
                logger.warning(f"Excluding post {slug}: {e}")
                errors[slug] = e
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Could not read post {slug}: {e}")
                errors[slug] = ValidationError("file", f"could not be read: {e}")

        self._documents = listing_order(documents)
        self._errors = errors
        logger.info(
            f"Loaded {len(documents)} posts ({len(errors)} rejected) "
            f"from {self.repo.root}"
        )

    def validate(self, document, body: str = "", slug: str = "") -> ContentDocument:
        """Validate one document given as raw text or as a metadata mapping."""
        if isinstance(document, str):
            metadata, body = parse_document(document)
        else:
            metadata = document
        return validator.validate(
            metadata,
            body,
            slug=slug,
            allowed_categories=self.allowed_categories,
            words_per_minute=self.words_per_minute,
        )

    def documents(self) -> List[ContentDocument]:
        """Every valid document, drafts included, in listing order."""
        self.load()
        return list(self._documents)

    def list_published(self) -> Iterator[ContentDocument]:
        self.load()
        return (doc for doc in self._documents if not doc.draft)

    def get_published(self, slug: str) -> Optional[ContentDocument]:
        for doc in self.list_published():
            if doc.slug == slug:
                return doc
        return None

    def list_by_tag(self, tag: str) -> List[ContentDocument]:
        wanted = tag.casefold()
        return [
            doc
            for doc in self.list_published()
            if any(t.casefold() == wanted for t in doc.tags)
        ]

    def list_by_category(self, category: str) -> List[ContentDocument]:
        wanted = category.casefold()
        return [
            doc for doc in self.list_published() if doc.category.casefold() == wanted
        ]

    def tags(self) -> Counter:
        return Counter(tag for doc in self.list_published() for tag in doc.tags)

    def categories(self) -> Counter:
        return Counter(doc.category for doc in self.list_published())

    def errors(self) -> Dict[str, ValidationError]:
        self.load()
        return dict(self._errors)

    def checklist(self) -> Optional[ChecklistDocument]:
        try:
            text = self.repo.read_checklist()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read checklist: {e}")
            return None
        if text is None:
            return None
        return parse_checklist(text)

    def _load_document(self, path, slug: str) -> ContentDocument:
        metadata, body = self.parser.parse(path)
        return self.validate(metadata, body, slug=slug)
