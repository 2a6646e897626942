# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
In-memory certificate store.

Records live in dictionaries guarded by a single lock. The store can be
seeded from JSON files:

    certificates.json: [{"certificate_id": ..., "certificate_pem_encoded": ...}]
    clients.json:      [{"client_id": ..., "certificate_id": ...}]
"""

import json
import logging
import threading
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional
from uuid import UUID

from ..errors import CertificateNotFoundError, ClientNotFoundError
from ..types import Certificate, Client
from .base import CertificateStore

logger = logging.getLogger(__name__)


class InMemoryStore(CertificateStore):
    """Dictionary-backed store, safe for concurrent use within one process."""

    def __init__(
        self,
        certificates_path: Optional[Path] = None,
        clients_path: Optional[Path] = None,
    ):
        """
        Initialize the store.

        Args:
            certificates_path: JSON file of certificates to load
            clients_path: JSON file of clients to load
        """
        self._lock = threading.Lock()
        self._certificates: Dict[UUID, Certificate] = {}
        self._clients: Dict[UUID, Client] = {}

        if certificates_path:
            self.load_certificates(Path(certificates_path))
        if clients_path:
            self.load_clients(Path(clients_path))

    def load_certificates(self, path: Path) -> int:
        """
        Load certificates from a JSON file.

        Payloads are stripped of surrounding whitespace.

        Returns:
            Number of certificates loaded
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        for item in data:
            certificate = Certificate.from_dict(item)
            self.add_certificate(replace(certificate, pem=certificate.pem.strip()))

        logger.info(f"Loaded {len(data)} certificates from {path}")
        return len(data)

    def load_clients(self, path: Path) -> int:
        """
        Load clients from a JSON file.

        Returns:
            Number of clients loaded
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        for item in data:
            self.add_client(Client.from_dict(item))

        logger.info(f"Loaded {len(data)} clients from {path}")
        return len(data)

    def add_certificate(self, certificate: Certificate) -> None:
        """Add or replace a certificate."""
        with self._lock:
            self._certificates[certificate.id] = certificate

    def add_client(self, client: Client) -> None:
        """Add or replace a client."""
        with self._lock:
            self._clients[client.id] = client

    def get_client(self, client_id: UUID) -> Client:
        with self._lock:
            client = self._clients.get(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    def get_certificate(self, certificate_id: UUID) -> Certificate:
        with self._lock:
            certificate = self._certificates.get(certificate_id)
        if certificate is None:
            raise CertificateNotFoundError(certificate_id)
        return certificate

    def list_certificates(self) -> List[Certificate]:
        with self._lock:
            return list(self._certificates.values())

    def update_client_certificate(self, client_id: UUID, certificate_id: UUID) -> bool:
        with self._lock:
            client = self._clients.get(client_id)
            if client is None:
                raise ClientNotFoundError(client_id)
            if client.certificate_id == certificate_id:
                return False
            self._clients[client_id] = replace(client, certificate_id=certificate_id)
            return True
