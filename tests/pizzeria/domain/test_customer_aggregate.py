"""Tests for the Customer aggregate."""

import pytest
from pizzeria.order.customer import Customer
from protean.exceptions import ValidationError


def _details(**overrides):
    details = {
        "first_name": "Grace",
        "last_name": "Hopper",
        "email": "grace@example.com",
        "phone": "(555) 010-2030",
    }
    details.update(overrides)
    return details


class TestCustomerForOrder:
    def test_binds_customer_to_order(self):
        customer = Customer.for_order("order-1", _details())

        assert customer.order_id == "order-1"
        assert customer.first_name == "Grace"
        assert customer.last_name == "Hopper"

    def test_address_is_optional(self):
        customer = Customer.for_order("order-1", _details())

        assert customer.street_address is None
        assert customer.city is None
        assert customer.province is None
        assert customer.postal_code is None

    def test_address_is_kept_when_given(self):
        customer = Customer.for_order(
            "order-1",
            _details(street_address="1 Harbour St", city="Halifax", province="NS", postal_code="B3J 1A1"),
        )

        assert customer.city == "Halifax"
        assert customer.postal_code == "B3J 1A1"

    @pytest.mark.parametrize("missing", ["first_name", "last_name", "email", "phone"])
    def test_contact_fields_are_mandatory(self, missing):
        details = _details()
        del details[missing]

        with pytest.raises(ValidationError) as exc:
            Customer.for_order("order-1", details)

        assert missing in exc.value.messages

    def test_order_reference_is_mandatory(self):
        with pytest.raises(ValidationError):
            Customer.for_order(None, _details())


class TestContactValidation:
    @pytest.mark.parametrize("email", ["grace", "grace@@example.com", "grace@example", "gr ace@example.com"])
    def test_malformed_email_rejected(self, email):
        with pytest.raises(ValidationError) as exc:
            Customer.for_order("order-1", _details(email=email))

        assert "email" in exc.value.messages

    @pytest.mark.parametrize(
        "email",
        [
            "grace..hopper@example.com",
            "grace@example..com",
            ".grace@example.com",
            "grace.@example.com",
            "grace@.example.com",
            "grace@example.com.",
            "gr;ace@example.com",
            "grace,hopper@example.com",
            "<grace>@example.com",
            "grace@-navy-.mil",
            "grace@navy.-mil",
        ],
    )
    def test_structurally_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError) as exc:
            Customer.for_order("order-1", _details(email=email))

        assert "email" in exc.value.messages

    @pytest.mark.parametrize("email", ["grace.hopper@navy.mil", "g+orders@sub-domain.example.com", "grace@[127.0.0.1]"])
    def test_well_formed_email_accepted(self, email):
        customer = Customer.for_order("order-1", _details(email=email))

        assert customer.email == email

    @pytest.mark.parametrize("phone", ["call me", "555#0101", "+-()"])
    def test_malformed_phone_rejected(self, phone):
        with pytest.raises(ValidationError) as exc:
            Customer.for_order("order-1", _details(phone=phone))

        assert "phone" in exc.value.messages

    def test_international_phone_accepted(self):
        customer = Customer.for_order("order-1", _details(phone="+44 20 7946 0958"))
        assert customer.phone == "+44 20 7946 0958"
