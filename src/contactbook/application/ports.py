"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Owns contact state and id assignment."""

    def list_all(self) -> list[Contact]:
        """Return all contacts in creation order. The list is a copy."""
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def create(self, name: str, email: str) -> Contact:
        """Assign the next id, store the contact and return it."""
        ...

    def update(self, contact_id: int, name: str, email: str) -> bool:
        """Replace name and email in place. Returns True if updated, False if not found."""
        ...

    def delete(self, contact_id: int) -> bool:
        """Remove the contact. Returns True if removed, False if not found."""
        ...

    def count(self) -> int:
        """Return the number of stored contacts."""
        ...
