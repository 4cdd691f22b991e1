from typing import List, Optional

from pydantic import BaseModel, Field


class ChecklistItem(BaseModel):
    text: str
    done: bool = False


class ChecklistSection(BaseModel):
    title: Optional[str] = None
    level: int = 0
    items: List[ChecklistItem] = Field(default_factory=list)


class ChecklistDocument(BaseModel):
    sections: List[ChecklistSection] = Field(default_factory=list)

    @property
    def items(self) -> List[ChecklistItem]:
        return [item for section in self.sections for item in section.items]

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def completed(self) -> int:
        return sum(1 for item in self.items if item.done)

    @property
    def pending(self) -> List[ChecklistItem]:
        return [item for item in self.items if not item.done]

    @property
    def progress(self) -> float:
        if not self.total:
            return 0.0
        return self.completed / self.total
