"""Contact list, lookup, create, update and remove."""

from contactbook.application.dto import (
    ContactAdded,
    ContactData,
    ContactNotFound,
    ContactRemoved,
    ContactUpdated,
)
from contactbook.application.ports import ContactRepository
from contactbook.domain import Contact


class ContactService:
    """Use cases over a ContactRepository. Absence is returned, never raised."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in creation order."""
        return self._repo.list_all()

    def get_contact(self, contact_id: int) -> Contact | None:
        """Return a contact by id, or None if not found."""
        return self._repo.get_by_id(contact_id)

    def add_contact(self, data: ContactData) -> ContactAdded:
        contact = self._repo.create(data.name, data.email)
        return ContactAdded(contact_id=contact.id)

    def update_contact(
        self, contact_id: int, data: ContactData
    ) -> ContactUpdated | ContactNotFound:
        """Replace name and email of an existing contact."""
        if not self._repo.update(contact_id, data.name, data.email):
            return ContactNotFound(contact_id=contact_id)
        return ContactUpdated(contact_id=contact_id)

    def remove_contact(self, contact_id: int) -> ContactRemoved | ContactNotFound:
        if not self._repo.delete(contact_id):
            return ContactNotFound(contact_id=contact_id)
        return ContactRemoved(contact_id=contact_id)
