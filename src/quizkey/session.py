"""
Quiz session engine.

Drives one quiz attempt through start -> playing -> feedback -> finished.
Correctness always comes from the backend's oracle; the session never sees
an answer key, only the answer revealed after a wrong guess.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .backend import QuizBackend
from .config import settings
from .countdown import Countdown
from .errors import BackendError, InvalidTransition, QuestionNotFound
from .models import CheckResult, PublicQuestion

logger = logging.getLogger(__name__)


def _check_timer(question_timer: int):
    if question_timer <= 0:
        raise ValueError(f"question_timer must be positive, got {question_timer}")


class GameState(str, Enum):
    START = "start"
    PLAYING = "playing"
    FEEDBACK = "feedback"
    FINISHED = "finished"


class QuizSession:
    def __init__(
        self,
        backend: QuizBackend,
        question_timer: Optional[int] = None,
        tick_interval: float = 1.0,
        high_score_ratio: Optional[float] = None,
        on_change: Optional[Callable[["QuizSession"], Any]] = None,
    ):
        self.backend = backend
        if question_timer is None:
            question_timer = settings.QUESTION_TIMER
        _check_timer(question_timer)
        self.question_timer = question_timer
        self.high_score_ratio = (
            settings.HIGH_SCORE_RATIO if high_score_ratio is None else high_score_ratio
        )
        self.on_change = on_change
        self._countdown = Countdown(tick_interval)
        # Bumped by restart() so a response for an abandoned attempt is dropped
        self._attempt = 0

        self.state = GameState.START
        self.questions: List[PublicQuestion] = []
        self.current_index = 0
        self.score = 0
        self.time_left = self.question_timer
        self.loading = False
        self.error: Optional[str] = None
        self.high_score = False
        self._clear_feedback()

    # --- Derived state ---
    @property
    def current_question(self) -> Optional[PublicQuestion]:
        if 0 <= self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    @property
    def score_ratio(self) -> float:
        return self.score / len(self.questions) if self.questions else 0.0

    @property
    def countdown_running(self) -> bool:
        return self._countdown.is_running

    def snapshot(self) -> Dict[str, Any]:
        """Plain view of the session for a presentation layer."""
        question = self.current_question
        return {
            "state": self.state.value,
            "question": question.model_dump() if question else None,
            "current_index": self.current_index,
            "total_questions": len(self.questions),
            "score": self.score,
            "time_left": self.time_left,
            "selected_option": self.selected_option,
            "is_correct": self.is_correct,
            "correct_answer_index": self.correct_answer_index,
            "timed_out": self.timed_out,
            "loading": self.loading,
            "error": self.error,
            "high_score": self.high_score,
        }

    # --- Actions ---
    async def start_quiz(self, question_timer: Optional[int] = None) -> bool:
        """Fetch the public questions and enter playing. False if the quiz cannot start."""
        self._require("start the quiz", GameState.START)
        if question_timer is not None:
            _check_timer(question_timer)
            self.question_timer = question_timer

        attempt = self._attempt
        self.loading = True
        self.error = None
        try:
            questions = await self.backend.list_questions()
        except BackendError as e:
            logger.error(f"Failed to load questions: {e}")
            questions = None
            error = "Could not load the questions. Please try again."
        finally:
            if attempt == self._attempt:
                self.loading = False

        if attempt != self._attempt:
            return False
        if questions is not None and not questions:
            logger.warning("Quiz cannot start: the question store is empty")
            error = "No questions are available right now."
        if not questions:
            self.error = error
            self._notify()
            return False

        self.questions = list(questions)
        self.current_index = 0
        self.score = 0
        self.high_score = False
        self._clear_feedback()
        logger.info(f"Quiz started with {len(self.questions)} questions")
        self._enter_playing()
        return True

    async def submit_answer(self, index: int) -> Optional[CheckResult]:
        """Ask the oracle about the current question. None if the check failed."""
        self._require("submit an answer", GameState.PLAYING)
        question = self.current_question
        attempt = self._attempt
        self._countdown.cancel()
        self.loading = True
        self.error = None
        try:
            result = await self.backend.check_answer(question.id, index)
        except QuestionNotFound as e:
            logger.error(f"Answer check rejected: {e}")
            result = None
            error = "This question is no longer available."
        except BackendError as e:
            logger.error(f"Answer check failed: {e}")
            result = None
            error = "Could not check your answer. Please try again."
        finally:
            if attempt == self._attempt:
                self.loading = False

        if attempt != self._attempt:
            return None
        if result is None:
            # The player keeps the question and whatever time was left
            self.error = error
            self._countdown.start(self.tick)
            self._notify()
            return None

        self.selected_option = index
        self.is_correct = result.is_correct
        self.correct_answer_index = result.correct_answer
        if result.is_correct:
            self.score += 1
        self.state = GameState.FEEDBACK
        logger.debug(
            f"Question {question.id}: {'correct' if result.is_correct else 'wrong'}, score {self.score}"
        )
        self._notify()
        return result

    def tick(self) -> bool:
        """One countdown step. Returns False once the countdown should stop."""
        if self.state != GameState.PLAYING or self.loading:
            return False
        self.time_left = max(self.time_left - 1, 0)
        if self.time_left == 0:
            self._time_out()
            return False
        self._notify()
        return True

    def advance(self):
        self._require("advance", GameState.FEEDBACK)
        if self.current_index >= len(self.questions) - 1:
            self.state = GameState.FINISHED
            self.high_score = self.score_ratio > self.high_score_ratio
            logger.info(f"Quiz finished: {self.score}/{len(self.questions)}")
            self._notify()
            return

        self.current_index += 1
        self._clear_feedback()
        self._enter_playing()

    def restart(self):
        """Abandon the attempt, whatever its state, and go back to start."""
        self._countdown.cancel()
        self._attempt += 1
        self.state = GameState.START
        self.questions = []
        self.current_index = 0
        self.score = 0
        self.time_left = self.question_timer
        self.loading = False
        self.error = None
        self.high_score = False
        self._clear_feedback()
        self._notify()

    # --- Internals ---
    def _require(self, action: str, state: GameState):
        if self.state != state:
            raise InvalidTransition(f"Cannot {action} while {self.state.value}")
        if self.loading:
            raise InvalidTransition(f"Cannot {action} while a request is in flight")

    def _clear_feedback(self):
        self.selected_option: Optional[int] = None
        self.is_correct: Optional[bool] = None
        self.correct_answer_index: Optional[int] = None
        self.timed_out = False

    def _enter_playing(self):
        self.time_left = self.question_timer
        self.state = GameState.PLAYING
        self._countdown.start(self.tick)
        self._notify()

    def _time_out(self):
        # Forced wrong: no oracle call, no points, the answer stays hidden
        self._countdown.cancel()
        self.selected_option = None
        self.is_correct = False
        self.correct_answer_index = None
        self.timed_out = True
        self.state = GameState.FEEDBACK
        logger.info(f"Time ran out on question {self.current_question.id}")
        self._notify()

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self)
