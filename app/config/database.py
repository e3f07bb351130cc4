from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .settings import settings

# SQLite comparte la conexión entre los hilos del threadpool de FastAPI
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

# Create engine
engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    pool_recycle=300,
    echo=settings.debug,
    connect_args=connect_args
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base de los modelos de inventario (app.shared.database.models)
Base = declarative_base()


def create_schema():
    """Crear las tablas de bodegas, productos y órdenes que no existan"""
    from app.shared.database import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


# Database dependency
def get_db():
    """Sesión de base de datos por petición"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
