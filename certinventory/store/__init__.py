# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate Stores

CertificateStore is the contract the workflow depends on. InMemoryStore
keeps records in process; DatabaseStore persists them with SQLAlchemy.
"""

from .base import CertificateStore
from .memory import InMemoryStore
from .database import DatabaseStore

__all__ = [
    "CertificateStore",
    "InMemoryStore",
    "DatabaseStore",
]
