class QuizError(Exception):
    """Base class for quiz errors."""


class StoreUnavailable(QuizError):
    """The question source could not be loaded."""


class QuestionNotFound(QuizError):
    def __init__(self, question_id: int):
        super().__init__(f"Question not found: {question_id}")
        self.question_id = question_id


class BackendError(QuizError):
    """A call to the question store failed in transport or returned garbage."""


class InvalidTransition(QuizError):
    """A session action was invoked from a state that does not accept it."""
