from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Entry:
    id: str
    question: str
    answer: str
    intent: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "Entry":
        """Build an entry from a stored document (camelCase field names)."""
        return cls(
            id=doc_id,
            question=_clean_text(data.get("question")) or "",
            answer=_clean_text(data.get("answer")) or "",
            intent=_clean_text(data.get("intent")),
            created_at=data.get("createdAt"),
        )

    def is_valid(self) -> bool:
        return bool(self.question) and bool(self.answer)

    def to_document(self) -> dict:
        document = {"question": self.question, "answer": self.answer}
        if self.intent:
            document["intent"] = self.intent
        if self.created_at:
            document["createdAt"] = self.created_at
        return document


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None
