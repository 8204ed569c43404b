from dataclasses import dataclass, field
from typing import List, Optional

ARCHIVED_SUFFIX = " (archived)"

"""Repository plus the topics, page URL and README text used for rendering."""
@dataclass
class EnrichedRepository:
    name: str
    title: str
    url: str
    archived: bool = False
    blurb: str = ""
    description: Optional[str] = None
    topics: List[str] = field(default_factory=list)

    @property
    def display_text(self) -> str:
        return self.title + (ARCHIVED_SUFFIX if self.archived else "")

    def sort_text(self, sort_field: str = "title") -> str:
        if sort_field == "description":
            return self.description or self.title
        return self.title
