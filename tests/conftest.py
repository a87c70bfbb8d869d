import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Base SQLite pour les tests AVANT d'importer tracker (settings lit l'env à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import uuid
import pytest

from tracker.core.database import Base, SessionLocal, engine, init_db
from tracker.services.project_service import create_project
from tracker.services.user_service import create_user


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    init_db(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def make_user(db):
    """Fabrique d'utilisateurs uniques"""
    def _make_user(password="password123"):
        unique_id = str(uuid.uuid4())[:8]
        return create_user(
            db,
            username=f"user{unique_id}",
            email=f"user{unique_id}@example.com",
            password=password
        )
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def other_user(make_user):
    return make_user()


@pytest.fixture
def project(db, user):
    return create_project(db, user.id, "Projet test")
