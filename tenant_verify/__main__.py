import sys

import uvicorn

from .config import load_settings
from .errors import ConfigError
from .main import create_app
from .utils.logging import configure_logging, logger


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging("error")
        logger.critical("Refusing to start: %s", exc)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
