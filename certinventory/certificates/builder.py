# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Self-signed certificate generation for seeding an inventory.

Test support: the test suite uses this to create certificates with chosen
serial numbers and validity windows. Nothing in the listing or assignment
path depends on it.
"""

import datetime
from typing import Optional

from cryptography import x509
from cryptography.x509.oid import NameOID
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec


class CertificateBuilder:
    """Build self-signed leaf certificates with a chosen serial and validity."""

    def __init__(self, common_name: str, organization: str = "Acme"):
        """
        Initialize certificate builder.

        Args:
            common_name: Subject and issuer CN
            organization: Subject and issuer O
        """
        self.common_name = common_name
        self.organization = organization
        self.serial_number: Optional[int] = None
        self.not_valid_before: Optional[datetime.datetime] = None
        self.not_valid_after: Optional[datetime.datetime] = None

    def set_serial_number(self, serial_number: int) -> "CertificateBuilder":
        """Set serial number (must be positive)."""
        if serial_number <= 0:
            raise ValueError(f"Invalid serial_number: {serial_number} (must be positive)")
        self.serial_number = serial_number
        return self

    def set_validity(
        self,
        not_valid_before: datetime.datetime,
        not_valid_after: datetime.datetime,
    ) -> "CertificateBuilder":
        """Set validity window (timezone-aware datetimes)."""
        if not_valid_after <= not_valid_before:
            raise ValueError("not_valid_after must be later than not_valid_before")
        self.not_valid_before = not_valid_before
        self.not_valid_after = not_valid_after
        return self

    def build(
        self,
        private_key: Optional[ec.EllipticCurvePrivateKey] = None,
        validity_days: int = 365,
    ) -> x509.Certificate:
        """
        Build and self-sign the certificate.

        Args:
            private_key: Signing key (a fresh P-256 key if omitted)
            validity_days: Validity used when set_validity() was not called

        Returns:
            Signed X.509 certificate
        """
        if private_key is None:
            private_key = ec.generate_private_key(ec.SECP256R1())

        name = x509.Name([
            x509.NameAttribute(NameOID.COMMON_NAME, self.common_name),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, self.organization),
        ])

        not_valid_before = self.not_valid_before
        not_valid_after = self.not_valid_after
        if not_valid_before is None:
            not_valid_before = datetime.datetime.now(datetime.timezone.utc)
            not_valid_after = not_valid_before + datetime.timedelta(days=validity_days)

        builder = (
            x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(private_key.public_key())
            .serial_number(self.serial_number or x509.random_serial_number())
            .not_valid_before(not_valid_before)
            .not_valid_after(not_valid_after)
            .add_extension(
                x509.BasicConstraints(ca=False, path_length=None),
                critical=True,
            )
        )

        return builder.sign(private_key, hashes.SHA256())

    def build_pem(self, private_key: Optional[ec.EllipticCurvePrivateKey] = None) -> bytes:
        """Build the certificate and return it PEM-encoded."""
        return self.build(private_key).public_bytes(serialization.Encoding.PEM)
