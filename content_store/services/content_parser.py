import logging
from typing import Tuple

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from content_store.exceptions import ValidationError
from content_store.schemas.content import ContentDocument

logger = logging.getLogger(__name__)

_handler = YAMLHandler()


def parse_document(text: str) -> Tuple[dict, str]:
    """Split a post into its frontmatter mapping and Markdown body."""
    if not text or not _handler.detect(text):
        raise ValidationError("frontmatter", "missing '---' delimited metadata block")

    try:
        raw_metadata, body = _handler.split(text)
    except ValueError as e:
        raise ValidationError("frontmatter", "metadata block is not terminated") from e

    try:
        metadata = _handler.load(raw_metadata)
    except yaml.YAMLError as e:
        raise ValidationError("frontmatter", f"unparseable YAML: {e}") from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValidationError(
            "frontmatter", "metadata block must be a mapping of key: value pairs"
        )
    return metadata, body.strip()


def dump_document(document: ContentDocument) -> str:
    """Serialize a document back to frontmatter + Markdown text."""
    post = frontmatter.Post(document.body, **document.metadata())
    return frontmatter.dumps(post, sort_keys=False)


class ContentParser:
    def __init__(self, repo):
        self.repo = repo

    def get_markdown_content(self, path) -> str:
        """Get the full markdown text of a file (frontmatter included)."""
        return self.repo.read_text(path) or ""

    def parse(self, path) -> Tuple[dict, str]:
        logger.debug(f"Parsing frontmatter for {path}")
        return parse_document(self.get_markdown_content(path))
