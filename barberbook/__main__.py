"""Run the API with uvicorn: ``python -m barberbook``."""
import uvicorn

from barberbook.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "barberbook.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
