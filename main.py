import logging

import uvicorn

from orderkey.config import get_settings


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    uvicorn.run("orderkey.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
