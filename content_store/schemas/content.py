import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

PUBLISH_DATE_FORMAT = "%Y-%m-%d %H:%M"


class ContentImage(BaseModel):
    src: str
    alt: str


class ContentDocument(BaseModel):
    slug: str
    title: str
    snippet: str
    publishDate: datetime.datetime
    category: str
    author: str
    image: Optional[ContentImage] = None
    tags: List[str] = Field(default_factory=list)
    draft: bool = False
    body: str = ""
    readingTime: Optional[str] = None

    @property
    def publish_date_text(self) -> str:
        return self.publishDate.strftime(PUBLISH_DATE_FORMAT)

    def metadata(self) -> dict:
        """Frontmatter keys in their authored form (publishDate as text)."""
        data = {
            "draft": self.draft,
            "title": self.title,
            "snippet": self.snippet,
            "publishDate": self.publish_date_text,
            "category": self.category,
            "author": self.author,
            "tags": list(self.tags),
        }
        if self.image is not None:
            data["image"] = self.image.model_dump()
        return data
