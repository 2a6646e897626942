# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate Inventory - Core Data Types

Stored records (Certificate, Client) and the derived views returned to
callers (CertificateView, AssignmentResult).

Example Usage:
    >>> from certinventory.types import Client
    >>>
    >>> client = Client.from_dict({
    ...     "client_id": "63838416-b316-418a-8cc8-9efe3411136c",
    ...     "certificate_id": "27bfe9fc-b80b-46a1-a967-78658db0aeec",
    ... })
"""

from .inventory import (
    AssignmentResult,
    Certificate,
    CertificateView,
    Client,
)

__all__ = [
    "AssignmentResult",
    "Certificate",
    "CertificateView",
    "Client",
]
