import uvicorn

from quizkey.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "quizkey.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
