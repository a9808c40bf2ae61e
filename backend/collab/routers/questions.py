# backend/collab/routers/questions.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from ..errors import PaginationError
from ..models.schemas import Question
from ..pagination import Pagination, extract_pagination
from ..store import QuestionStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["questions"])


def get_store(request: Request) -> QuestionStore:
    return request.app.state.store


def get_pagination(request: Request) -> Pagination:
    # raw query mapping: FastAPI's int coercion would answer 422, not 416
    try:
        return extract_pagination(request.query_params)
    except PaginationError as e:
        logger.debug("pagination rejected for %s: %s", request.url.query, e)
        raise


@router.get("/questions", response_model=List[Question])
def get_questions(
    pagination: Pagination = Depends(get_pagination),
    store: QuestionStore = Depends(get_store),
):
    return pagination.apply(store.all_questions())
