from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Warehouse Inventory API"
    version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./warehouse.db"
    create_tables: bool = Field(
        default=True,
        description="Crear el esquema al iniciar la aplicación"
    )

    # Inbound orders
    timezone: str = Field(
        default="America/Bogota",
        description="Zona horaria usada para fechar las órdenes de entrada"
    )

    # CORS
    allowed_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
