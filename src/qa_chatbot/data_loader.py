import json
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class QADatasetLoader:
    """
    Loads and normalizes a question/answer dataset from a JSON file.

    The file holds a JSON array of {"intent"?, "question", "answer"} objects.
    """
    def __init__(self, json_path: str):
        self.json_path = json_path

    def load_documents(self) -> List[dict]:
        with open(self.json_path, encoding="utf-8") as f:
            rows = json.load(f)

        if not isinstance(rows, list):
            raise ValueError(f"{self.json_path} must contain a JSON array of Q&A objects")

        documents: List[dict] = []
        for row in rows:
            document = self._parse_row(row)
            if document:
                documents.append(document)

        skipped = len(rows) - len(documents)
        if skipped:
            logger.warning(f"Skipped {skipped} rows without a question or answer")

        return documents

    def _parse_row(self, row) -> Optional[dict]:
        if not isinstance(row, dict):
            return None

        question = self._clean_text(row.get("question"))
        answer = self._clean_text(row.get("answer"))
        if not question or not answer:
            return None

        document = {"question": question, "answer": answer}
        intent = self._clean_text(row.get("intent"))
        if intent:
            document["intent"] = intent
        if row.get("createdAt"):
            document["createdAt"] = row["createdAt"]
        return document

    def _clean_text(self, value) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value if value else None
