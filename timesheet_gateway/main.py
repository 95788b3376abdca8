import logging

import uvicorn

from timesheet_gateway.api.main import create_app
from timesheet_gateway.config import load_config
from timesheet_gateway.logging_config.logging_config import setup_logging


# ruff: noqa: D103
def main() -> None:
    config = load_config()
    setup_logging(config["LOG_DIR"])
    logger = logging.getLogger(__name__)
    logger.info(f"Starting Field Timesheet Gateway on port {config['PORT']}")

    uvicorn.run(
        create_app(config["ALLOWED_ORIGINS"]),
        host=config["HOST"],
        port=config["PORT"],
        log_config=None,
    )


if __name__ == "__main__":
    main()
