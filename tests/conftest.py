import textwrap
from pathlib import PurePosixPath


class FakeRepo:
    """
    Minimal in-memory stand-in for FileContentRepo.
    Keys of ``files`` are slugs; values are raw post text (dedented).
    Set a value to an exception instance to make reading that post fail.
    """

    def __init__(self, files: dict, checklist: str | None = None):
        self.root = PurePosixPath("fake")
        self.files = files
        self.checklist = checklist
        self.reads = []

    def list_content_files(self):
        return [self.root / f"{slug}.md" for slug in sorted(self.files)]

    def slug_for(self, path):
        return str(PurePosixPath(path).relative_to(self.root).with_suffix(""))

    def read_text(self, path):
        slug = self.slug_for(path)
        self.reads.append(slug)
        raw = self.files[slug]
        if isinstance(raw, Exception):
            raise raw
        return textwrap.dedent(raw).lstrip()

    def read_checklist(self):
        if self.checklist is None:
            return None
        return textwrap.dedent(self.checklist).lstrip()


def make_post(
    title="A Post",
    publish_date="2024-12-15 09:00",
    draft="false",
    extra="",
    body="Body text.",
):
    """Build post text; pass ``None`` to leave a field out."""
    lines = ["---"]
    if draft is not None:
        lines.append(f"draft: {draft}")
    if title is not None:
        lines.append(f"title: {title}")
    lines.append("snippet: Short summary")
    if publish_date is not None:
        lines.append(f'publishDate: "{publish_date}"')
    lines.append("category: Guides")
    lines.append("author: Content Team")
    lines.append("tags: [seo, geo]")
    if extra:
        lines.append(extra)
    lines.append("---")
    lines.append(body)
    return "\n".join(lines) + "\n"
