# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Error types for the certificate inventory.

Every failure maps to exactly one classification through ``status_code``:
missing records are not-found, a no-op assignment is a bad request, and
corrupt stored data or store failures are server-side errors.
"""

from http import HTTPStatus
from typing import Optional
from uuid import UUID


class InventoryError(Exception):
    """Base class for all certificate inventory errors."""

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def is_client_error(self) -> bool:
        """True when the caller caused the failure (4xx)."""
        return 400 <= self.status_code < 500

    def to_dict(self) -> dict:
        """Convert to an error body (code + message)."""
        return {"code": int(self.status_code), "message": self.detail}


class ClientNotFoundError(InventoryError):
    """No client exists with the requested identifier."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, client_id: UUID):
        super().__init__("client not found")
        self.client_id = client_id


class CertificateNotFoundError(InventoryError):
    """No certificate exists with the requested identifier."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, certificate_id: UUID):
        super().__init__("certificate not found")
        self.certificate_id = certificate_id


class NoCertificateChangeError(InventoryError):
    """The client is already assigned the requested certificate."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, client_id: UUID, certificate_id: UUID):
        super().__init__("current certificate matches existing certificate")
        self.client_id = client_id
        self.certificate_id = certificate_id


class CertificateFormatError(InventoryError, ValueError):
    """A stored certificate payload could not be turned into a certificate."""

    def __init__(self, detail: str, certificate_id: Optional[UUID] = None):
        if certificate_id is not None:
            detail = f"invalid certificate {certificate_id}: {detail}"
        super().__init__(detail)
        self.certificate_id = certificate_id


class CertificateDecodeError(CertificateFormatError):
    """No PEM envelope could be decoded from the payload."""


class CertificateParseError(CertificateFormatError):
    """The PEM body is not a valid DER-encoded X.509 certificate."""


class StoreError(InventoryError):
    """The backing store failed to complete an operation."""
