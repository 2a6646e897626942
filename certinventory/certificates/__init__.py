# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate Utilities

PEM/X.509 decoding, serial number formatting and certificate generation.
"""

from .codec import (
    CertificateCodec,
    decode_certificate,
    format_serial_number,
)

from .builder import CertificateBuilder

__all__ = [
    # Codec
    "CertificateCodec",
    "decode_certificate",
    "format_serial_number",
    # Builders
    "CertificateBuilder",
]
