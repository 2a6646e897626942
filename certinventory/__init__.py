# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate Inventory

Lists stored X.509 certificates as canonical views and assigns certificates
to clients.

Modules:
    certificates: PEM/DER decoding and serial number formatting
    store: Storage contract plus in-memory and SQLAlchemy backends
    workflow: Listing and assignment operations
    errors: Error classification shared by all components

Example:
    >>> from certinventory.store import InMemoryStore
    >>> from certinventory.workflow import CertificateService
    >>>
    >>> service = CertificateService(InMemoryStore())
    >>> service.list_certificates()
    []
"""

__version__ = "0.1.0"
__author__ = "The Birthmark Standard Foundation"

__all__ = [
    "certificates",
    "store",
    "workflow",
    "errors",
]
