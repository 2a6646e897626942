# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate listing and assignment.

CertificateService is the entry point used by request handlers. It performs
no recovery of its own: every error from the store or the codec propagates
to the caller unchanged.
"""

import logging
from typing import List
from uuid import UUID

from .certificates import decode_certificate
from .errors import NoCertificateChangeError
from .store import CertificateStore
from .types import AssignmentResult, CertificateView

logger = logging.getLogger(__name__)


class CertificateService:
    """Orchestrates certificate listing and client assignment over a store."""

    def __init__(self, store: CertificateStore):
        self.store = store

    def list_certificates(self) -> List[CertificateView]:
        """
        List all certificates as canonical views.

        Views are ordered by the string form of the certificate id so that
        repeated calls over unchanged data return identical sequences.
        A single corrupt certificate fails the whole listing.

        Returns:
            Certificate views sorted by id

        Raises:
            CertificateDecodeError: If a stored payload has no PEM envelope
            CertificateParseError: If a stored payload is not a valid certificate
        """
        certificates = sorted(self.store.list_certificates(), key=lambda c: str(c.id))
        views = [decode_certificate(c) for c in certificates]

        logger.debug(f"Listed {len(views)} certificates")
        return views

    def assign_certificate(self, client_id: UUID, certificate_id: UUID) -> AssignmentResult:
        """
        Assign a certificate to a client.

        Checks run in a fixed order: client exists, certificate exists,
        assignment actually changes. Only then is the store updated.

        Args:
            client_id: Client to update
            certificate_id: Certificate to assign

        Returns:
            The client id with a view of the newly assigned certificate

        Raises:
            ClientNotFoundError: If the client does not exist
            CertificateNotFoundError: If the certificate does not exist
            NoCertificateChangeError: If the client already has this certificate
        """
        client = self.store.get_client(client_id)
        certificate = self.store.get_certificate(certificate_id)

        if client.certificate_id == certificate_id:
            logger.warning(
                f"Client {client_id} already assigned certificate {certificate_id}"
            )
            raise NoCertificateChangeError(client_id, certificate_id)

        # A concurrent writer may have assigned the same certificate since the check
        if not self.store.update_client_certificate(client_id, certificate_id):
            logger.warning(
                f"Client {client_id} was assigned certificate {certificate_id} concurrently"
            )
            raise NoCertificateChangeError(client_id, certificate_id)

        logger.info(
            f"Assigned certificate {certificate_id} to client {client_id} "
            f"(previous: {client.certificate_id})"
        )

        return AssignmentResult(
            client_id=client_id,
            certificate=decode_certificate(certificate),
        )
