# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Storage contract consumed by the certificate workflow."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..types import Certificate, Client


class CertificateStore(ABC):
    """
    Persistence for certificates and client assignments.

    Implementations raise ClientNotFoundError / CertificateNotFoundError for
    missing records and StoreError for backend failures.
    """

    @abstractmethod
    def get_client(self, client_id: UUID) -> Client:
        """Get a client by id."""

    @abstractmethod
    def get_certificate(self, certificate_id: UUID) -> Certificate:
        """Get a certificate by id."""

    @abstractmethod
    def list_certificates(self) -> List[Certificate]:
        """List all certificates, in no particular order."""

    @abstractmethod
    def update_client_certificate(self, client_id: UUID, certificate_id: UUID) -> bool:
        """
        Assign a certificate to a client if it is not already assigned.

        The check and the write happen atomically with respect to other
        writers for the same client.

        Args:
            client_id: Client to update
            certificate_id: Certificate to assign

        Returns:
            True if the assignment changed, False if it already matched

        Raises:
            ClientNotFoundError: If the client does not exist
        """
