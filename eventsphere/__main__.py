import logging

import uvicorn

from eventsphere.core.config import HOST, PORT, get_log_level

logger = logging.getLogger("eventsphere")


def main() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Backend Server API running on port %s", PORT)
    uvicorn.run("eventsphere.main:app", host=HOST, port=PORT, log_level=get_log_level().lower())


if __name__ == "__main__":
    main()
