import logging
import os
import zipfile
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd
from pydantic import ValidationError

from .bank import DEFAULT_QUESTIONS
from .errors import StoreUnavailable
from .models import Question

logger = logging.getLogger(__name__)

ANSWER_LETTERS = {"A": 0, "B": 1, "C": 2, "D": 3}
OPTION_COLUMNS = ["A", "B", "C", "D"]
REQUIRED_COLUMNS = ["Question", *OPTION_COLUMNS, "Answer"]


# --- Strategy Pattern: Question Sources ---
class QuestionSource(ABC):
    """Supplies the full question records, answers included."""

    @abstractmethod
    def load(self) -> List[Question]:
        """Return every question, or raise StoreUnavailable."""


class StaticQuestionSource(QuestionSource):
    """Questions held in memory, e.g. the built-in bank."""

    def __init__(self, records: Iterable[Union[Question, Dict[str, Any]]]):
        self.records = list(records)

    def load(self) -> List[Question]:
        try:
            return [
                r if isinstance(r, Question) else Question.model_validate(r)
                for r in self.records
            ]
        except ValidationError as e:
            raise StoreUnavailable(f"Invalid question record: {e}") from e


class SpreadsheetQuestionSource(QuestionSource):
    """
    Tabular question import. One row per question with the columns
    Question, A, B, C, D, Answer and an optional Image. Reads the first
    sheet of .xlsx/.xls workbooks, or a .csv file.
    """

    def __init__(self, path: str, image_url_prefix: str = "/quiz-images"):
        self.path = path
        self.image_url_prefix = image_url_prefix.rstrip("/")

    def load(self) -> List[Question]:
        if not os.path.exists(self.path):
            logger.error(f"Question file not found at {self.path}")
            raise StoreUnavailable(f"Question file not found: {self.path}")

        df = self._read_frame()
        df.columns = [str(c).strip() for c in df.columns]
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise StoreUnavailable(
                f"{self.path} is missing columns: {', '.join(missing)}"
            )

        questions = []
        for position, row in enumerate(df.to_dict("records")):
            question = self._parse_row(position + 1, row)
            if question is not None:
                questions.append(question)
        logger.info(f"Loaded {len(questions)} questions from {self.path}")
        return questions

    def _read_frame(self) -> pd.DataFrame:
        ext = os.path.splitext(self.path)[1].lower()
        try:
            if ext == ".csv":
                return pd.read_csv(
                    self.path, dtype=str, keep_default_na=False, encoding="utf-8"
                )
            return pd.read_excel(self.path, dtype=str, keep_default_na=False)
        except (OSError, ValueError, ImportError, zipfile.BadZipFile) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            raise StoreUnavailable(f"Cannot read {self.path}: {e}") from e

    def _parse_row(self, question_id: int, row: Dict[str, Any]) -> Optional[Question]:
        text = str(row.get("Question", "")).strip()
        if not text:
            logger.warning(f"Skipping row {question_id}: empty question text")
            return None

        letter = str(row.get("Answer", "")).strip().upper()
        if letter not in ANSWER_LETTERS:
            logger.warning(
                f"Row {question_id}: unknown answer '{letter}', defaulting to A"
            )

        return Question(
            id=question_id,
            text=text,
            options=[str(row.get(c, "")) for c in OPTION_COLUMNS],
            correct_answer=ANSWER_LETTERS.get(letter, 0),
            image=self._image_url(row.get("Image", "")),
        )

    def _image_url(self, value: Any) -> Optional[str]:
        image = str(value or "").strip()
        if not image:
            return None
        if image.startswith("http"):
            return image
        return f"{self.image_url_prefix}/{image}"


class SourceFactory:
    """Picks the question source for the configured question file."""

    @staticmethod
    def create(question_file: str = "", image_url_prefix: str = "/quiz-images") -> QuestionSource:
        if question_file:
            return SpreadsheetQuestionSource(question_file, image_url_prefix)
        return StaticQuestionSource(DEFAULT_QUESTIONS)
