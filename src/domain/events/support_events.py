"""Support context domain events."""

from src.domain.events.base_event import DomainEvent

CONTACT_REQUEST_SUBMITTED = "contact_request_submitted"


def contact_request_submitted(
    request_id: str, name: str, email: str, subject: str
) -> DomainEvent:
    """Contact form submitted.

    Raises:
        ValueError: If any argument is empty.
    """
    for label, value in (
        ("request_id", request_id),
        ("name", name),
        ("email", email),
        ("subject", subject),
    ):
        if not value:
            raise ValueError(f"{label} cannot be empty")
    return DomainEvent.new(
        CONTACT_REQUEST_SUBMITTED,
        request_id,
        "contact_request",
        {"name": name, "email": email, "subject": subject},
    )
