from dataclasses import dataclass
from typing import Any, Dict, Optional

"""Repository as returned by the organization listing endpoint."""
@dataclass(frozen=True)
class Repository:
    name: str
    description: Optional[str] = None
    archived: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Repository":
        return cls(
            name=data["name"],
            description=data.get("description") or None,
            archived=bool(data.get("archived", False)),
        )
