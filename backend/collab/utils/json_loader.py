# backend/collab/utils/json_loader.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ..errors import StoreLoadError
from ..models.schemas import Question

logger = logging.getLogger(__name__)


def load_questions(path: Union[str, Path]) -> Dict[str, Question]:
    """
    讀取題目 JSON 檔，回傳 {id: Question}（保留檔案順序）。

    接受兩種格式：
      - {"1": {"id": "1", ...}, "2": {...}}   key 必須等於 record 的 id
      - [{"id": "1", ...}, {...}]
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise StoreLoadError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise StoreLoadError(path, f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise StoreLoadError(path, f"invalid JSON: {e}") from e

    questions = _normalize(path, raw)
    logger.info("loaded %d questions from %s", len(questions), path)
    return questions


def _normalize(path: Path, raw: Any) -> Dict[str, Question]:
    if isinstance(raw, dict):
        entries: List[tuple] = list(raw.items())
    elif isinstance(raw, list):
        entries = [(None, r) for r in raw]
    else:
        raise StoreLoadError(path, "expected a JSON object or array of questions")

    mapped: Dict[str, Question] = {}
    for i, (key, record) in enumerate(entries):
        where = f"record {key!r}" if key is not None else f"record #{i}"
        if not isinstance(record, dict):
            raise StoreLoadError(path, f"{where} is not an object")
        try:
            q = Question.model_validate(record)
        except ValidationError as e:
            raise StoreLoadError(path, f"{where} is invalid: {e}") from e
        if key is not None and key != q.id:
            raise StoreLoadError(path, f"{where} has mismatching id {q.id!r}")
        if q.id in mapped:
            raise StoreLoadError(path, f"duplicate question id {q.id!r}")
        mapped[q.id] = q
    return mapped
