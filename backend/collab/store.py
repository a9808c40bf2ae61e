# backend/collab/store.py
"""
Read-only, in-memory question store.

Built once at startup and shared by every request; nothing writes to it
afterwards, so handlers read it without locking.
"""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Union

from .errors import StoreLoadError
from .models.schemas import Question
from .utils.json_loader import load_questions


class QuestionStore:
    def __init__(self, questions: Mapping[str, Question]) -> None:
        self._questions = MappingProxyType(dict(questions))

    @classmethod
    def from_questions(cls, questions: Iterable[Question]) -> "QuestionStore":
        mapped = {}
        for q in questions:
            if q.id in mapped:
                raise StoreLoadError("<memory>", f"duplicate question id {q.id!r}")
            mapped[q.id] = q
        return cls(mapped)

    @classmethod
    def load_all(cls, path: Union[str, Path]) -> "QuestionStore":
        """Raises StoreLoadError if the file is missing or malformed."""
        return cls(load_questions(path))

    @property
    def questions(self) -> Mapping[str, Question]:
        return self._questions

    def all_questions(self) -> List[Question]:
        """Snapshot of every record, in load order."""
        return list(self._questions.values())

    def __len__(self) -> int:
        return len(self._questions)
