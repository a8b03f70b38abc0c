"""Domain entities: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact list.
    The id is assigned by the repository on creation and never changes.
    """

    id: int
    name: str
    email: str
