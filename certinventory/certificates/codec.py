# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate decoding for the inventory.

Turns a stored PEM payload into a CertificateView: the PEM envelope is
unwrapped, the DER body parsed as X.509, and the serial number rendered as
colon-separated hex byte pairs.

Payloads are UTF-8 text. Text outside the PEM block (e.g. a human-readable
preamble) is allowed and kept in the view unchanged.
"""

import logging
from typing import Optional, Union
from uuid import UUID

from asn1crypto import pem
from cryptography import x509

from ..errors import CertificateDecodeError, CertificateFormatError, CertificateParseError
from ..types import Certificate, CertificateView

logger = logging.getLogger(__name__)


def format_serial_number(serial: int) -> str:
    """
    Format a certificate serial number as colon-separated hex byte pairs.

    Uses the minimal number of lower-case hex digits, left-padded with one
    zero when the digit count is odd. Zero renders as "00".

    Args:
        serial: Non-negative serial number (arbitrary precision)

    Returns:
        Formatted serial, e.g. "35:3c:ff:fb:d1"

    Raises:
        ValueError: If serial is negative
    """
    if serial < 0:
        raise ValueError(f"Serial number must be non-negative, got {serial}")

    hex_str = format(serial, "x")
    if len(hex_str) % 2:
        hex_str = "0" + hex_str

    return ":".join(hex_str[i:i + 2] for i in range(0, len(hex_str), 2))


class CertificateCodec:
    """Decode stored PEM payloads into canonical certificate views."""

    @staticmethod
    def decode_pem(payload: Union[bytes, str]) -> bytes:
        """
        Extract the DER bytes from the first PEM block in the payload.

        Args:
            payload: UTF-8 PEM text, surrounding whitespace allowed

        Returns:
            DER-encoded bytes inside the envelope

        Raises:
            CertificateDecodeError: If the payload is not UTF-8, no PEM block is
                present, or its body is not base64
        """
        if isinstance(payload, str):
            payload = payload.encode("utf-8")

        try:
            payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CertificateDecodeError(f"failed to decode PEM: payload is not UTF-8 ({e.reason})")

        payload = payload.strip()
        if not pem.detect(payload):
            raise CertificateDecodeError("failed to decode PEM")

        try:
            _, _, der_bytes = pem.unarmor(payload)
        except ValueError as e:
            raise CertificateDecodeError(f"failed to decode PEM: {e}")

        return der_bytes

    @staticmethod
    def load_certificate(der_bytes: bytes) -> x509.Certificate:
        """
        Load DER-encoded certificate.

        Raises:
            CertificateParseError: If the bytes are not a valid X.509 certificate
                or carry a negative serial number
        """
        try:
            cert = x509.load_der_x509_certificate(der_bytes)
        except ValueError as e:
            raise CertificateParseError(f"failed to parse certificate: {e}")

        if cert.serial_number < 0:
            raise CertificateParseError(
                f"failed to parse certificate: negative serial number {cert.serial_number}"
            )
        return cert

    @classmethod
    def load_pem_certificate(cls, payload: Union[bytes, str]) -> x509.Certificate:
        """Unwrap the PEM envelope and parse the certificate inside it."""
        return cls.load_certificate(cls.decode_pem(payload))

    @classmethod
    def decode(
        cls,
        payload: bytes,
        certificate_id: Optional[UUID] = None,
    ) -> CertificateView:
        """
        Decode a PEM payload into a CertificateView.

        Validity timestamps are reduced to UTC calendar dates.

        Args:
            payload: PEM-encoded certificate
            certificate_id: Identifier to copy into the view and into errors

        Raises:
            CertificateDecodeError: If no PEM envelope is found
            CertificateParseError: If the envelope does not hold a valid certificate
        """
        try:
            cert = cls.load_pem_certificate(payload)
        except CertificateFormatError as e:
            if certificate_id is None:
                raise
            logger.error(f"Stored certificate {certificate_id} is corrupt: {e.detail}")
            raise type(e)(e.detail, certificate_id=certificate_id) from e

        return CertificateView(
            id=certificate_id,
            not_before=cert.not_valid_before_utc.date(),
            not_after=cert.not_valid_after_utc.date(),
            serial_number=format_serial_number(cert.serial_number),
            pem=payload,
        )


def decode_certificate(certificate: Certificate) -> CertificateView:
    """Decode a stored certificate into its canonical view."""
    return CertificateCodec.decode(certificate.pem, certificate_id=certificate.id)
