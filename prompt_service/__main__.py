"""Run the service with uvicorn: ``python -m prompt_service``."""
import uvicorn

from prompt_service.config import settings


def main():
    uvicorn.run(
        "prompt_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    main()
