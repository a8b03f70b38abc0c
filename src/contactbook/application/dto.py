"""Input DTO and result types for contact use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactData:
    """Name and email supplied by a client. The id is never client-supplied."""

    name: str
    email: str


# --- add_contact results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact was created and stored under a new id."""

    contact_id: int


# --- update_contact / remove_contact results ---


@dataclass(frozen=True)
class ContactUpdated:
    """Name and email were replaced; id and list position kept."""

    contact_id: int


@dataclass(frozen=True)
class ContactRemoved:
    """Contact was deleted. Its id is not handed out again."""

    contact_id: int


@dataclass(frozen=True)
class ContactNotFound:
    """No contact with the given id."""

    contact_id: int
