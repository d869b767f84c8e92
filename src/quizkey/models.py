from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class PublicQuestion(BaseModel):
    """A question as the player sees it: no answer key."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    text: str
    options: List[str]
    image: Optional[str] = None


class Question(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(gt=0)
    text: str
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer: int = Field(ge=0, le=3, alias="correctAnswer")
    image: Optional[str] = None

    def to_public(self) -> PublicQuestion:
        return PublicQuestion(
            id=self.id, text=self.text, options=list(self.options), image=self.image
        )


class CheckRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_id: StrictInt = Field(alias="questionId")
    selected_option: StrictInt = Field(alias="selectedOption")


class CheckResult(BaseModel):
    """Verdict of the answer oracle. The answer is only revealed when wrong."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_correct: bool = Field(alias="isCorrect")
    correct_answer: Optional[int] = Field(default=None, alias="correctAnswer")


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str = "ok"
    version: str
    questions: int
