import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .errors import QuestionNotFound
from .globals import question_store
from .router import router
from .store import QuestionStore


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("quizkey")
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return
    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)
    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=logging.INFO)


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store.load()
    yield


# --- Error Handlers ---
async def question_not_found_handler(request: Request, exc: QuestionNotFound):
    return JSONResponse({"error": "Question not found"}, status_code=404)


# --- App Factory ---
def create_app(store: Optional[QuestionStore] = None) -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )
    app.state.store = store if store is not None else question_store

    app.add_exception_handler(QuestionNotFound, question_not_found_handler)
    app.include_router(router, prefix=settings.API_PREFIX)

    if os.path.isdir(settings.IMAGE_DIR):
        app.mount(
            settings.IMAGE_URL_PREFIX,
            StaticFiles(directory=settings.IMAGE_DIR),
            name="quiz-images",
        )

    return app
