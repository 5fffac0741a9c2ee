"""Initialize database tables."""
import logging

from sqlmodel import SQLModel

from life_manage.db.config import engine
from life_manage.models import Conversation, Note, Project, Task, UserSettings  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(target_engine=None):
    """Create all tables in the database."""
    logger.info("[DB INIT] Creating all tables...")
    SQLModel.metadata.create_all(target_engine or engine)
    logger.info("[DB INIT] Tables created successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
