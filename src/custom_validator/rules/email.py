"""Email address rule (``is-email``)."""

from __future__ import annotations

from email_validator import EmailNotValidError
from email_validator import validate_email as parse_email_address

from custom_validator.traversal.level import FieldLevel


def is_email(value: str) -> bool:
    """Return True if ``value`` parses as exactly one mail address.

    Accepts the bare ``local@domain`` form, the display-name form
    ``Name <local@domain>``, quoted local parts with backslash escapes,
    and bracketed domain literals. Domains need not be globally routable,
    but the reserved names email-validator rejects outright (``localhost``,
    ``invalid``, ``local``, ``onion``, ``arpa``) still fail. Deliverability
    (DNS) is not checked.
    """
    try:
        parse_email_address(
            value,
            check_deliverability=False,
            allow_display_name=True,
            allow_quoted_local=True,
            allow_domain_literal=True,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def validate_email(fl: FieldLevel) -> bool:
    return is_email(fl.as_string())
