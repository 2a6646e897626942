# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for certificate listing and assignment.

Every test runs against both the in-memory and the database store.
"""

import datetime
import uuid
from http import HTTPStatus
from unittest import mock

import pytest

from certinventory.errors import (
    CertificateDecodeError,
    CertificateNotFoundError,
    ClientNotFoundError,
    NoCertificateChangeError,
    StoreError,
)
from certinventory.store import InMemoryStore
from certinventory.types import Certificate, Client
from certinventory.workflow import CertificateService

from conftest import (
    CERT_27BFE9FC_ID,
    CERT_F0E5137F_ID,
    CLIENT_ID,
    UNKNOWN_CERT_ID,
    UNKNOWN_CLIENT_ID,
)


class TestListCertificates:
    """Test listing certificates."""

    def test_lists_all_certificates(self, service, pem_27bfe9fc, pem_f0e5137f):
        """All stored certificates are returned as views, ordered by id."""
        views = service.list_certificates()

        assert [v.id for v in views] == [CERT_27BFE9FC_ID, CERT_F0E5137F_ID]

        first, second = views
        assert first.not_before == datetime.date(2025, 5, 16)
        assert first.not_after == datetime.date(2026, 7, 25)
        assert first.serial_number == "5b:19:ff:73:a8:d9:d2:56:cd:fe:8b:07:cf:29:eb:5b:4d:53:b6:30"
        assert first.pem == pem_27bfe9fc

        assert second.not_before == datetime.date(2025, 5, 16)
        assert second.not_after == datetime.date(2026, 12, 25)
        assert second.serial_number == "35:3c:ff:fb:d1:84:6e:ab:7d:82:3c:df:9f:4e:47:52:81:c9:2d:9d"
        assert second.pem == pem_f0e5137f

    def test_repeated_listing_identical(self, service):
        """Listing twice without changes gives the same sequence."""
        assert service.list_certificates() == service.list_certificates()

    def test_order_independent_of_store(self, store):
        """Ordering is imposed even when the store returns records reversed."""
        reversed_store = mock.Mock(wraps=store)
        reversed_store.list_certificates.return_value = list(
            reversed(sorted(store.list_certificates(), key=lambda c: str(c.id)))
        )

        views = CertificateService(reversed_store).list_certificates()

        assert [v.id for v in views] == [CERT_27BFE9FC_ID, CERT_F0E5137F_ID]

    def test_empty_store(self):
        """No certificates gives an empty list."""
        assert CertificateService(InMemoryStore()).list_certificates() == []

    def test_corrupt_certificate_fails_listing(self, service, store):
        """One corrupt certificate fails the whole listing instead of being skipped."""
        corrupt_id = uuid.UUID("00000000-0000-4000-8000-000000000001")
        store.add_certificate(Certificate(id=corrupt_id, pem=b"corrupted"))

        with pytest.raises(CertificateDecodeError) as exc_info:
            service.list_certificates()

        assert exc_info.value.certificate_id == corrupt_id
        assert exc_info.value.status_code == HTTPStatus.INTERNAL_SERVER_ERROR

    def test_store_failure_propagates(self, store):
        """Store failures reach the caller unchanged."""
        failing = mock.Mock(wraps=store)
        failing.list_certificates.side_effect = StoreError("database unavailable")

        with pytest.raises(StoreError):
            CertificateService(failing).list_certificates()


class TestAssignCertificate:
    """Test assigning certificates to clients."""

    def test_updates_client_certificate(self, service, store, pem_f0e5137f):
        """A different, existing certificate is assigned and returned."""
        result = service.assign_certificate(CLIENT_ID, CERT_F0E5137F_ID)

        assert result.client_id == CLIENT_ID
        assert result.certificate.id == CERT_F0E5137F_ID
        assert result.certificate.not_after == datetime.date(2026, 12, 25)
        assert result.certificate.serial_number.startswith("35:3c:ff:fb")
        assert result.certificate.pem == pem_f0e5137f

        assert store.get_client(CLIENT_ID).certificate_id == CERT_F0E5137F_ID

    def test_unknown_client(self, service):
        """Unknown clients are reported even when the certificate exists."""
        with pytest.raises(ClientNotFoundError) as exc_info:
            service.assign_certificate(UNKNOWN_CLIENT_ID, CERT_F0E5137F_ID)

        assert exc_info.value.client_id == UNKNOWN_CLIENT_ID
        assert exc_info.value.status_code == HTTPStatus.NOT_FOUND
        assert exc_info.value.to_dict() == {"code": 404, "message": "client not found"}

    def test_unknown_client_checked_before_certificate(self, service):
        """With both ids unknown, the client is reported."""
        with pytest.raises(ClientNotFoundError):
            service.assign_certificate(UNKNOWN_CLIENT_ID, UNKNOWN_CERT_ID)

    def test_unknown_certificate(self, service, store):
        """Unknown certificates are reported for a known client."""
        with pytest.raises(CertificateNotFoundError) as exc_info:
            service.assign_certificate(CLIENT_ID, UNKNOWN_CERT_ID)

        assert exc_info.value.certificate_id == UNKNOWN_CERT_ID
        assert exc_info.value.to_dict() == {"code": 404, "message": "certificate not found"}
        assert store.get_client(CLIENT_ID).certificate_id == CERT_27BFE9FC_ID

    def test_same_certificate_rejected(self, store):
        """Assigning the current certificate is a bad request and changes nothing."""
        spy = mock.Mock(wraps=store)

        with pytest.raises(NoCertificateChangeError) as exc_info:
            CertificateService(spy).assign_certificate(CLIENT_ID, CERT_27BFE9FC_ID)

        assert exc_info.value.status_code == HTTPStatus.BAD_REQUEST
        assert exc_info.value.to_dict() == {
            "code": 400,
            "message": "current certificate matches existing certificate",
        }
        spy.update_client_certificate.assert_not_called()
        assert store.get_client(CLIENT_ID).certificate_id == CERT_27BFE9FC_ID

    def test_second_assignment_rejected(self, service):
        """Repeating a successful assignment is a no-op change."""
        service.assign_certificate(CLIENT_ID, CERT_F0E5137F_ID)

        with pytest.raises(NoCertificateChangeError):
            service.assign_certificate(CLIENT_ID, CERT_F0E5137F_ID)

    def test_assign_back_and_forth(self, service, store):
        """Assignments can move between certificates repeatedly."""
        service.assign_certificate(CLIENT_ID, CERT_F0E5137F_ID)
        result = service.assign_certificate(CLIENT_ID, CERT_27BFE9FC_ID)

        assert result.certificate.id == CERT_27BFE9FC_ID
        assert store.get_client(CLIENT_ID).certificate_id == CERT_27BFE9FC_ID

    def test_client_without_certificate(self, service, store):
        """A client with no assignment yet can be assigned one."""
        new_client = Client(id=UNKNOWN_CLIENT_ID)
        store.add_client(new_client)

        result = service.assign_certificate(UNKNOWN_CLIENT_ID, CERT_27BFE9FC_ID)

        assert result.client_id == UNKNOWN_CLIENT_ID
        assert store.get_client(UNKNOWN_CLIENT_ID).certificate_id == CERT_27BFE9FC_ID

    def test_lost_race_reported_as_no_change(self, store):
        """A concurrent identical assignment between check and write is a no-op change."""
        racing = mock.Mock(wraps=store)
        racing.update_client_certificate.return_value = False

        with pytest.raises(NoCertificateChangeError):
            CertificateService(racing).assign_certificate(CLIENT_ID, CERT_F0E5137F_ID)

    def test_result_to_dict(self, service):
        """Results serialize to JSON-ready values."""
        data = service.assign_certificate(CLIENT_ID, CERT_F0E5137F_ID).to_dict()

        assert data["client_id"] == str(CLIENT_ID)
        assert data["certificate"]["id"] == str(CERT_F0E5137F_ID)
        assert data["certificate"]["not_before"] == "2025-05-16"
        assert data["certificate"]["not_after"] == "2026-12-25"
        assert data["certificate"]["certificate_pem_encoded"].startswith(
            "-----BEGIN CERTIFICATE-----"
        )
