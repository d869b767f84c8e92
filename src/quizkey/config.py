import os


class Settings:
    PROJECT_NAME: str = "quizkey"
    VERSION: str = "1.0.5"
    DEBUG: bool = os.environ.get("DEBUG", "").lower() in ("1", "true", "yes")
    LOG_DIR: str = os.environ.get("LOG_DIR", "log")
    LOG_FILE: str = "quizkey.log"
    QUESTION_FILE: str = os.environ.get("QUIZ_QUESTION_FILE", "")
    IMAGE_DIR: str = os.environ.get("QUIZ_IMAGE_DIR", "quiz-images")
    IMAGE_URL_PREFIX: str = "/quiz-images"
    QUESTION_TIMER: int = int(os.environ.get("QUIZ_QUESTION_TIMER", "20"))
    HIGH_SCORE_RATIO: float = 0.7
    API_PREFIX: str = os.environ.get("API_PREFIX", "/api")
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "8000"))


settings = Settings()
