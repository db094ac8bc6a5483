"""Customer aggregate: contact and address details of whoever placed an order."""

import re
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from pizzeria.domain import pizzeria

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")
_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@pizzeria.aggregate
class Customer:
    """The person an order is prepared for.

    Every customer belongs to exactly one order, referenced by ``order_id``,
    and is removed together with it. Address fields are optional because
    pick-up orders need none.
    """

    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    street_address = String(max_length=255)
    city = String(max_length=100)
    province = String(max_length=100)
    postal_code = String(max_length=20)
    email = String(required=True, max_length=254)
    phone = String(required=True, max_length=20)
    order_id = Identifier(required=True)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        """Exactly one @, dotted domain, no consecutive dots, no forbidden characters."""
        email = self.email
        if email is None:
            return

        invalid = ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise invalid

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise invalid

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise invalid

        literal_domain = domain_part.startswith("[") and domain_part.endswith("]")
        if not literal_domain:
            if "." not in domain_part:
                raise invalid
            # Domain labels may not start or end with a hyphen
            if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
                raise invalid

        if ".." in local_part or ".." in domain_part:
            raise invalid

        for forbidden in _FORBIDDEN_EMAIL_CHARS:
            if forbidden in email and not (forbidden in "[]" and literal_domain):
                raise invalid

    @invariant.post
    def phone_must_be_dialable(self):
        number = self.phone
        if number is None:
            return

        if not re.search(r"\d", number) or not _PHONE_PATTERN.match(number):
            raise ValidationError({"phone": [f"Invalid phone number: {number!r}"]})

    @classmethod
    def for_order(cls, order_id, details):
        """Bind a customer built from ``details`` to the order ``order_id``."""
        now = datetime.now()
        return cls(
            first_name=details.get("first_name"),
            last_name=details.get("last_name"),
            street_address=details.get("street_address"),
            city=details.get("city"),
            province=details.get("province"),
            postal_code=details.get("postal_code"),
            email=details.get("email"),
            phone=details.get("phone"),
            order_id=order_id,
            created_at=now,
            updated_at=now,
        )
