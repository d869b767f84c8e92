"""
Client-side access to the question store.

The session engine only ever talks to a QuizBackend, so it never holds an
answer key of its own: it gets public questions and asks the oracle.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import BackendError, QuestionNotFound
from .models import CheckRequest, CheckResult, PublicQuestion
from .store import QuestionStore

logger = logging.getLogger(__name__)

_public_questions = TypeAdapter(List[PublicQuestion])


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class QuizBackend(ABC):
    @abstractmethod
    async def list_questions(self) -> List[PublicQuestion]:
        pass

    @abstractmethod
    async def check_answer(self, question_id: int, selected_option: int) -> CheckResult:
        pass


class LocalBackend(QuizBackend):
    """Calls a QuestionStore in the same process."""

    def __init__(self, store: QuestionStore):
        self.store = store

    async def list_questions(self) -> List[PublicQuestion]:
        return self.store.list_public_questions()

    async def check_answer(self, question_id: int, selected_option: int) -> CheckResult:
        return self.store.check_answer(question_id, selected_option)


class HttpBackend(QuizBackend):
    """Calls the quiz server's /questions and /check endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        api_prefix: str = "/api",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self.api_prefix = api_prefix.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def list_questions(self) -> List[PublicQuestion]:
        response = await self._request("GET", "/questions")
        try:
            return _public_questions.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise BackendError(f"Malformed question list: {e}") from e

    async def check_answer(self, question_id: int, selected_option: int) -> CheckResult:
        body = CheckRequest(question_id=question_id, selected_option=selected_option)
        response = await self._request(
            "POST", "/check", json=body.model_dump(by_alias=True), not_found_ok=True
        )
        if response.status_code == 404:
            if "error" not in _json_or_empty(response):
                # A route 404, e.g. a wrong api_prefix, is not an oracle verdict
                raise BackendError(f"/check not found under {self.api_prefix!r}")
            raise QuestionNotFound(question_id)
        try:
            return CheckResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise BackendError(f"Malformed check result: {e}") from e

    async def _request(self, method: str, path: str, not_found_ok: bool = False, **kwargs) -> httpx.Response:
        url = f"{self.api_prefix}{path}"
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise BackendError(f"{method} {url} failed: {e}") from e

        if response.status_code == 404 and not_found_ok:
            return response
        if response.is_error:
            logger.error(f"{method} {url} returned {response.status_code}")
            raise BackendError(f"{method} {url} returned {response.status_code}")
        return response

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()
