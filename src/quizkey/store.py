import logging
from typing import Dict, List, Optional

from .errors import QuestionNotFound, StoreUnavailable
from .models import CheckResult, PublicQuestion, Question
from .sources import QuestionSource

logger = logging.getLogger(__name__)


# --- Service Layer: Question Custody ---
class QuestionStore:
    """
    Sole holder of the answer key. Questions leave the store only through
    list_public_questions (answers stripped) and check_answer (the oracle).
    """

    def __init__(self, source: QuestionSource):
        self.source = source
        self.load_error: Optional[str] = None
        self._questions: Dict[int, Question] = {}
        self._loaded = False

    def load(self) -> int:
        self._questions = {}
        self.load_error = None
        self._loaded = True
        try:
            questions = self.source.load()
        except StoreUnavailable as e:
            self.load_error = str(e)
            logger.error(f"Question source unavailable, serving no questions: {e}")
            return 0

        for question in questions:
            if question.id in self._questions:
                logger.error(f"Skipping duplicate question id {question.id}")
                continue
            self._questions[question.id] = question
        logger.info(f"Question store loaded {len(self._questions)} questions")
        return len(self._questions)

    def ensure_loaded(self):
        if not self._loaded:
            self.load()

    @property
    def count(self) -> int:
        self.ensure_loaded()
        return len(self._questions)

    @property
    def is_available(self) -> bool:
        self.ensure_loaded()
        return self.load_error is None

    def list_public_questions(self) -> List[PublicQuestion]:
        self.ensure_loaded()
        return [q.to_public() for q in self._questions.values()]

    def check_answer(self, question_id: int, selected_option: int) -> CheckResult:
        self.ensure_loaded()
        question = self._questions.get(question_id)
        if question is None:
            logger.warning(f"Answer check for unknown question id {question_id}")
            raise QuestionNotFound(question_id)

        is_correct = question.correct_answer == selected_option
        return CheckResult(
            is_correct=is_correct,
            correct_answer=None if is_correct else question.correct_answer,
        )
