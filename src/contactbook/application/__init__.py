"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    ContactAdded,
    ContactData,
    ContactNotFound,
    ContactRemoved,
    ContactUpdated,
)
from contactbook.application.ports import ContactRepository

__all__ = [
    "ContactRepository",
    "ContactService",
    "ContactData",
    "ContactAdded",
    "ContactUpdated",
    "ContactRemoved",
    "ContactNotFound",
]
