import logging
from typing import Optional

from tracker.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    # le SQL est déjà contrôlé par SQL_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
