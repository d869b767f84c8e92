from .config import settings
from .sources import SourceFactory
from .store import QuestionStore

question_store = QuestionStore(
    SourceFactory.create(settings.QUESTION_FILE, settings.IMAGE_URL_PREFIX)
)
