import asyncio

import httpx
import pytest

from quizkey.app import create_app
from quizkey.backend import HttpBackend, LocalBackend
from quizkey.errors import BackendError, QuestionNotFound
from quizkey.models import CheckResult


def asgi_backend(store):
    transport = httpx.ASGITransport(app=create_app(store))
    client = httpx.AsyncClient(transport=transport, base_url="http://quiz.test")
    return HttpBackend(client=client)


def mock_backend(handler):
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://quiz.test"
    )
    return HttpBackend(client=client)


def test_local_backend(one_question_store):
    async def scenario():
        backend = LocalBackend(one_question_store)
        questions = await backend.list_questions()
        assert [q.id for q in questions] == [1]
        assert await backend.check_answer(1, 2) == CheckResult(is_correct=True)
        with pytest.raises(QuestionNotFound):
            await backend.check_answer(999, 0)

    asyncio.run(scenario())


def test_http_backend_round_trip(three_question_store):
    async def scenario():
        backend = asgi_backend(three_question_store)
        try:
            questions = await backend.list_questions()
            assert [q.id for q in questions] == [1, 2, 7]
            assert await backend.check_answer(7, 3) == CheckResult(is_correct=True)
            assert await backend.check_answer(7, 1) == CheckResult(
                is_correct=False, correct_answer=3
            )
        finally:
            await backend.client.aclose()

    asyncio.run(scenario())


def test_http_backend_not_found(one_question_store):
    async def scenario():
        backend = asgi_backend(one_question_store)
        try:
            with pytest.raises(QuestionNotFound) as exc:
                await backend.check_answer(999, 0)
            assert exc.value.question_id == 999
        finally:
            await backend.client.aclose()

    asyncio.run(scenario())


def test_http_backend_transport_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def scenario():
        backend = mock_backend(handler)
        with pytest.raises(BackendError):
            await backend.list_questions()
        with pytest.raises(BackendError):
            await backend.check_answer(1, 0)

    asyncio.run(scenario())


def test_http_backend_server_error():
    async def scenario():
        backend = mock_backend(lambda request: httpx.Response(500, json={"error": "boom"}))
        with pytest.raises(BackendError):
            await backend.list_questions()
        with pytest.raises(BackendError):
            await backend.check_answer(1, 0)

    asyncio.run(scenario())


def test_http_backend_malformed_payloads():
    def handler(request):
        if request.url.path.endswith("/questions"):
            return httpx.Response(200, json={"not": "a list"})
        return httpx.Response(200, text="<html>")

    async def scenario():
        backend = mock_backend(handler)
        with pytest.raises(BackendError):
            await backend.list_questions()
        with pytest.raises(BackendError):
            await backend.check_answer(1, 0)

    asyncio.run(scenario())


def test_http_backend_sends_camel_case_body():
    seen = []

    def handler(request):
        seen.append((request.url.path, request.read()))
        return httpx.Response(200, json={"isCorrect": False, "correctAnswer": 2})

    async def scenario():
        backend = mock_backend(handler)
        result = await backend.check_answer(1, 0)
        assert result == CheckResult(is_correct=False, correct_answer=2)

    asyncio.run(scenario())
    path, body = seen[0]
    assert path == "/api/check"
    assert b'"questionId"' in body and b'"selectedOption"' in body


def test_http_backend_wrong_prefix_is_not_a_verdict(one_question_store):
    async def scenario():
        transport = httpx.ASGITransport(app=create_app(one_question_store))
        client = httpx.AsyncClient(transport=transport, base_url="http://quiz.test")
        backend = HttpBackend(api_prefix="/v2", client=client)
        try:
            with pytest.raises(BackendError):
                await backend.check_answer(1, 2)
        finally:
            await client.aclose()

    asyncio.run(scenario())


def test_http_backend_not_found_needs_error_body():
    async def scenario():
        backend = mock_backend(lambda request: httpx.Response(404, text="gone"))
        with pytest.raises(BackendError):
            await backend.check_answer(1, 0)
        backend = mock_backend(lambda request: httpx.Response(404, json={"error": "Question not found"}))
        with pytest.raises(QuestionNotFound):
            await backend.check_answer(1, 0)

    asyncio.run(scenario())
