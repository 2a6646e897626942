# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Pytest configuration and fixtures."""

import uuid
from pathlib import Path

import pytest

from certinventory.store import DatabaseStore, InMemoryStore
from certinventory.types import Certificate, Client
from certinventory.workflow import CertificateService


FIXTURES_DIR = Path(__file__).parent / "fixtures"

CERT_27BFE9FC_ID = uuid.UUID("27bfe9fc-b80b-46a1-a967-78658db0aeec")
CERT_F0E5137F_ID = uuid.UUID("f0e5137f-03e1-4ca9-8dd9-b79da983d6be")
CLIENT_ID = uuid.UUID("63838416-B316-418A-8CC8-9EFE3411136C")
UNKNOWN_CLIENT_ID = uuid.UUID("49973760-cfdc-462c-be8c-d8db6d44f093")
UNKNOWN_CERT_ID = uuid.UUID("35d5113b-419c-4620-bb23-6d5d5b1cd361")


@pytest.fixture
def pem_27bfe9fc() -> bytes:
    """Reference certificate assigned to CLIENT_ID in the seed data."""
    return (FIXTURES_DIR / "27bfe9fc.pem").read_bytes().strip()


@pytest.fixture
def pem_f0e5137f() -> bytes:
    """Reference certificate not assigned to anyone in the seed data."""
    return (FIXTURES_DIR / "f0e5137f.pem").read_bytes().strip()


@pytest.fixture
def memory_store() -> InMemoryStore:
    """In-memory store seeded from the JSON fixtures."""
    return InMemoryStore(
        certificates_path=FIXTURES_DIR / "certificates.json",
        clients_path=FIXTURES_DIR / "clients.json",
    )


@pytest.fixture
def database_store(tmp_path, pem_27bfe9fc, pem_f0e5137f) -> DatabaseStore:
    """SQLite-backed store holding the same records as memory_store."""
    store = DatabaseStore(f"sqlite:///{tmp_path / 'inventory.db'}")
    store.create_tables()

    store.add_certificate(Certificate(id=CERT_27BFE9FC_ID, pem=pem_27bfe9fc))
    store.add_certificate(Certificate(id=CERT_F0E5137F_ID, pem=pem_f0e5137f))
    store.add_client(Client(id=CLIENT_ID, certificate_id=CERT_27BFE9FC_ID))

    yield store

    store.engine.dispose()


@pytest.fixture(params=["memory", "database"])
def store(request):
    """Each seeded store backend in turn."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def service(store) -> CertificateService:
    """Service over each seeded store backend."""
    return CertificateService(store)
