from typing import List

from fastapi import APIRouter, Depends, Request

from .config import settings
from .models import CheckRequest, CheckResult, ErrorResponse, HealthStatus, PublicQuestion
from .store import QuestionStore

router = APIRouter()


# --- Dependencies ---
def get_store(request: Request) -> QuestionStore:
    return request.app.state.store


# --- Routes ---
@router.get("/health", response_model=HealthStatus)
async def health(store: QuestionStore = Depends(get_store)):
    status = "ok" if store.is_available else "degraded"
    return HealthStatus(status=status, version=settings.VERSION, questions=store.count)


@router.get("/questions", response_model=List[PublicQuestion])
async def list_questions(store: QuestionStore = Depends(get_store)):
    """Every active question, answers stripped."""
    return store.list_public_questions()


@router.post(
    "/check",
    response_model=CheckResult,
    responses={404: {"model": ErrorResponse}},
)
async def check_answer(body: CheckRequest, store: QuestionStore = Depends(get_store)):
    # QuestionNotFound is turned into a 404 by the app's exception handler
    return store.check_answer(body.question_id, body.selected_option)
