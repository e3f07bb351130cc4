"""
Configuración de pytest y fixtures compartidos.

Fixtures:
- client: TestClient de la app; los servicios se reemplazan con app.dependency_overrides
- db_session: sesión SQLite en memoria con el esquema creado
- db_client: TestClient cuyo get_db usa db_session
"""

import os
from typing import Generator

# La app no debe tocar la base configurada al importarse en tests
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import Base, get_db
from app.main import app
from app.shared.database import models  # noqa: F401


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def override(client):
    """Registrar un servicio falso para la dependencia indicada"""

    def _override(dependency, fake):
        app.dependency_overrides[dependency] = lambda: fake
        return fake

    return _override


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_client(db_session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
