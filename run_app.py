import uvicorn

from edgegeo.config import get_settings


def main() -> None:
    """Run the FastAPI application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "edgegeo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
