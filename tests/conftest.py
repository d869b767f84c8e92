import pytest
from fastapi.testclient import TestClient

from quizkey.app import create_app
from quizkey.config import settings
from quizkey.errors import StoreUnavailable
from quizkey.sources import QuestionSource, StaticQuestionSource
from quizkey.store import QuestionStore

ONE_QUESTION = [
    {
        "id": 1,
        "text": "Pick c",
        "options": ["a", "b", "c", "d"],
        "correctAnswer": 2,
    }
]

THREE_QUESTIONS = [
    {"id": 1, "text": "First", "options": ["a", "b", "c", "d"], "correctAnswer": 0},
    {"id": 2, "text": "Second", "options": ["a", "b", "c", "d"], "correctAnswer": 1},
    {
        "id": 7,
        "text": "Third",
        "options": ["a", "b", "c", "d"],
        "correctAnswer": 3,
        "image": "https://example.com/cube.png",
    },
]


class BrokenSource(QuestionSource):
    def load(self):
        raise StoreUnavailable("source is gone")


@pytest.fixture(autouse=True, scope="session")
def log_dir(tmp_path_factory):
    settings.LOG_DIR = str(tmp_path_factory.mktemp("log"))
    yield settings.LOG_DIR


@pytest.fixture
def one_question_store():
    return QuestionStore(StaticQuestionSource(ONE_QUESTION))


@pytest.fixture
def three_question_store():
    return QuestionStore(StaticQuestionSource(THREE_QUESTIONS))


@pytest.fixture
def empty_store():
    return QuestionStore(StaticQuestionSource([]))


@pytest.fixture
def broken_store():
    return QuestionStore(BrokenSource())


@pytest.fixture
def client(three_question_store):
    with TestClient(create_app(three_question_store)) as c:
        yield c
