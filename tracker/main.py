import logging

from tracker.core.database import engine, init_db
from tracker.core.log_config import configure_logging

logger = logging.getLogger(__name__)


def main():
    configure_logging()
    # Init DB
    init_db()
    logger.info(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    main()
