# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Configuration management for the certificate inventory."""

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .store import CertificateStore, DatabaseStore, InMemoryStore
from .workflow import CertificateService

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CERTINVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    store_backend: Literal["memory", "database"] = "memory"
    database_url: str = "sqlite:///./certinventory.db"
    database_echo: bool = False

    # Seed files for the in-memory store
    seed_certificates_path: Optional[Path] = None
    seed_clients_path: Optional[Path] = None

    # Logging
    log_level: str = "INFO"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def create_store(settings: Settings) -> CertificateStore:
    """
    Build the store selected by settings.

    Args:
        settings: Application settings

    Returns:
        InMemoryStore seeded from the configured files, or a DatabaseStore
        with its tables created
    """
    if settings.store_backend == "database":
        logger.info(f"Using database store: {settings.database_url}")
        store = DatabaseStore(settings.database_url, echo=settings.database_echo)
        store.create_tables()
        return store

    logger.info("Using in-memory store")
    return InMemoryStore(
        certificates_path=settings.seed_certificates_path,
        clients_path=settings.seed_clients_path,
    )


def create_service(settings: Optional[Settings] = None) -> CertificateService:
    """Build a CertificateService over the configured store."""
    if settings is None:
        settings = Settings()
    return CertificateService(create_store(settings))
