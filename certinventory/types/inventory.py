# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Inventory records and the views derived from them.

Certificate and Client mirror what the store persists. CertificateView is
recomputed from a Certificate every time it is surfaced and is never stored.
PEM payloads are UTF-8 text; the codec rejects anything else.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID


def _as_uuid(value) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


@dataclass(frozen=True)
class Certificate:
    """
    Stored certificate.

    Attributes:
        id: Unique certificate identifier
        pem: PEM-encoded X.509 certificate bytes
    """

    id: UUID
    pem: bytes

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "certificate_id": str(self.id),
            "certificate_pem_encoded": self.pem.decode("utf-8"),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Certificate":
        """Create from dictionary (JSON deserialization)."""
        pem = data["certificate_pem_encoded"]
        if isinstance(pem, str):
            pem = pem.encode("utf-8", errors="surrogatepass")
        return cls(id=_as_uuid(data["certificate_id"]), pem=pem)


@dataclass(frozen=True)
class Client:
    """
    Stored client.

    The certificate reference is a lookup key only; the client does not own
    the certificate.

    Attributes:
        id: Unique client identifier
        certificate_id: Currently assigned certificate (None before first assignment)
    """

    id: UUID
    certificate_id: Optional[UUID] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "client_id": str(self.id),
            "certificate_id": str(self.certificate_id) if self.certificate_id else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Client":
        """Create from dictionary (JSON deserialization)."""
        certificate_id = data.get("certificate_id")
        return cls(
            id=_as_uuid(data["client_id"]),
            certificate_id=_as_uuid(certificate_id) if certificate_id else None,
        )


@dataclass(frozen=True)
class CertificateView:
    """
    Canonical, display-ready projection of a stored certificate.

    Attributes:
        id: Identifier copied from the stored certificate
        not_before: Start of validity (UTC calendar date)
        not_after: End of validity (UTC calendar date)
        serial_number: Colon-separated lower-case hex byte pairs
        pem: Original PEM payload
    """

    id: UUID
    not_before: date
    not_after: date
    serial_number: str
    pem: bytes

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": str(self.id),
            "not_before": self.not_before.isoformat(),
            "not_after": self.not_after.isoformat(),
            "serial_number": self.serial_number,
            "certificate_pem_encoded": self.pem.decode("utf-8"),
        }


@dataclass(frozen=True)
class AssignmentResult:
    """Outcome of a successful certificate assignment."""

    client_id: UUID
    certificate: CertificateView

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "client_id": str(self.client_id),
            "certificate": self.certificate.to_dict(),
        }
