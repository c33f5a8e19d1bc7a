"""Run the Taskboard API with uvicorn."""
from __future__ import annotations

import logging

from uvicorn import run

from app.core.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Taskboard running on http://%s:%s", settings.host, settings.port)
    run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
