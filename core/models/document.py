from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

_FILENAME_UNSAFE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def to_markdown(title: str, content: str) -> str:
    return f"# {title}\n\n{content}"


def markdown_filename(title: str) -> str:
    """Each character outside [A-Za-z0-9] becomes '-', then lower-cased."""
    return f"{_FILENAME_UNSAFE.sub('-', title or '').lower()}.md"


@dataclass
class Document:
    """A generated article held in client memory; never persisted."""

    title: str
    content: str
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_response(cls, data: Dict, created_at: Optional[datetime] = None) -> "Document":
        title = str(data.get("title") or "").strip() or "Untitled"
        content = str(data.get("content") or "")
        return cls(title=title, content=content, created_at=created_at or datetime.now())

    def to_markdown(self) -> str:
        return to_markdown(self.title, self.content)

    def filename(self) -> str:
        return markdown_filename(self.title)

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "content": self.content,
            "createdAt": self.created_at.isoformat(),
        }
