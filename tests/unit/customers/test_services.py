"""Unit tests for CustomerService.

Covers:
- create_customer: happy path, duplicate CPF, concurrent duplicate.
- update_customer: descriptive fields only, not found.
- delete_customer: permanent removal, not found.
- activate/deactivate: idempotent transitions, not found.
- get_customer / get_customer_by_cpf: found, not found, malformed CPF.
- list_active_customers: window translation, bounds.
"""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerData,
)
from modules.customers.models import Customer
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit

VALID_CPF = "11144477735"


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return CustomerService(repository=mock_repo)


def _make_customer(**overrides) -> Customer:
    defaults = {"cpf": VALID_CPF, "name": "João Silva", "email": "joao@example.com"}
    defaults.update(overrides)
    return Customer(**defaults)


# ===========================================================================
# create_customer
# ===========================================================================


class TestCreateCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_cpf.return_value = None
        mock_repo.save.side_effect = lambda c: c

        dto = CreateCustomerDTO(cpf="111.444.777-35", name="João Silva")
        customer = service.create_customer(dto)

        assert customer.cpf == VALID_CPF
        assert customer.name == "João Silva"
        assert customer.email == ""
        assert customer.is_active is True
        mock_repo.get_by_cpf.assert_called_once_with(VALID_CPF)
        mock_repo.save.assert_called_once()

    def test_duplicate_cpf(self, service, mock_repo):
        mock_repo.get_by_cpf.return_value = _make_customer()

        with pytest.raises(CustomerAlreadyExists, match="CPF already registered"):
            service.create_customer(CreateCustomerDTO(cpf=VALID_CPF, name="Other"))
        mock_repo.save.assert_not_called()

    def test_concurrent_duplicate(self, service, mock_repo):
        mock_repo.get_by_cpf.return_value = None
        mock_repo.save.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(CustomerAlreadyExists):
            service.create_customer(CreateCustomerDTO(cpf=VALID_CPF, name="Ana"))


# ===========================================================================
# update_customer
# ===========================================================================


class TestUpdateCustomer:
    def test_applies_supplied_fields(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_id.return_value = customer
        mock_repo.save.side_effect = lambda c: c

        updated = service.update_customer(
            str(customer.id), UpdateCustomerDTO(name="João Souza", phone="11999990000")
        )

        assert updated.name == "João Souza"
        assert updated.phone == "11999990000"
        assert updated.email == "joao@example.com"

    def test_keeps_identity_and_activation(self, service, mock_repo):
        customer = _make_customer(is_active=False)
        original_id = customer.id
        mock_repo.get_by_id.return_value = customer
        mock_repo.save.side_effect = lambda c: c

        updated = service.update_customer(str(original_id), UpdateCustomerDTO(name="X"))

        assert updated.id == original_id
        assert updated.cpf == VALID_CPF
        assert updated.is_active is False

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(CustomerNotFound):
            service.update_customer(str(uuid.uuid4()), UpdateCustomerDTO(name="X"))
        mock_repo.save.assert_not_called()


# ===========================================================================
# delete_customer
# ===========================================================================


class TestDeleteCustomer:
    def test_success(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_id.return_value = customer

        service.delete_customer(str(customer.id))

        mock_repo.delete.assert_called_once_with(str(customer.id))

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(CustomerNotFound):
            service.delete_customer(str(uuid.uuid4()))
        mock_repo.delete.assert_not_called()


# ===========================================================================
# activate / deactivate
# ===========================================================================


class TestActivation:
    def test_deactivate(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_id.return_value = customer
        mock_repo.set_active.return_value = True

        assert service.deactivate_customer(str(customer.id)) is customer
        mock_repo.set_active.assert_called_once_with(customer, False)

    def test_activate(self, service, mock_repo):
        customer = _make_customer(is_active=False)
        mock_repo.get_by_id.return_value = customer
        mock_repo.set_active.return_value = True

        service.activate_customer(str(customer.id))
        mock_repo.set_active.assert_called_once_with(customer, True)

    def test_repeated_call_is_not_an_error(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_id.return_value = customer
        mock_repo.set_active.return_value = False

        assert service.activate_customer(str(customer.id)) is customer

    @pytest.mark.parametrize("method", ["activate_customer", "deactivate_customer"])
    def test_not_found(self, service, mock_repo, method):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(CustomerNotFound):
            getattr(service, method)(str(uuid.uuid4()))
        mock_repo.set_active.assert_not_called()


# ===========================================================================
# Queries
# ===========================================================================


class TestGetCustomer:
    def test_success(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_id.return_value = customer
        assert service.get_customer(str(customer.id)) is customer

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(CustomerNotFound):
            service.get_customer(str(uuid.uuid4()))


class TestGetCustomerByCpf:
    def test_normalises_before_lookup(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_cpf.return_value = customer

        assert service.get_customer_by_cpf("111.444.777-35") is customer
        mock_repo.get_by_cpf.assert_called_once_with(VALID_CPF)

    def test_not_found_masks_cpf(self, service, mock_repo):
        mock_repo.get_by_cpf.return_value = None
        with pytest.raises(CustomerNotFound) as excinfo:
            service.get_customer_by_cpf(VALID_CPF)
        assert VALID_CPF not in str(excinfo.value)
        assert "***35" in str(excinfo.value)

    def test_malformed(self, service, mock_repo):
        with pytest.raises(InvalidCustomerData) as excinfo:
            service.get_customer_by_cpf("abc")
        assert excinfo.value.violations[0].field == "cpf"
        mock_repo.get_by_cpf.assert_not_called()


class TestListActiveCustomers:
    def test_translates_page_to_window(self, service, mock_repo):
        mock_repo.list_active.return_value = []
        service.list_active_customers(page=2, size=10)
        mock_repo.list_active.assert_called_once_with(offset=20, limit=10)

    def test_clamps_size(self, service, mock_repo):
        mock_repo.list_active.return_value = []
        service.list_active_customers(page=0, size=1000)
        mock_repo.list_active.assert_called_once_with(offset=0, limit=100)

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0), (0, -5)])
    def test_rejects_bounds(self, service, mock_repo, page, size):
        with pytest.raises(InvalidCustomerData):
            service.list_active_customers(page=page, size=size)
        mock_repo.list_active.assert_not_called()


class TestListCustomers:
    def test_delegates_filters(self, service, mock_repo):
        service.list_customers({"is_active": True})
        mock_repo.list.assert_called_once_with({"is_active": True})
