"""Run the API with uvicorn: ``python -m job_tracker``."""
import uvicorn

from job_tracker.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "job_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
