"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository).
"""

from contactbook.application import (
    ContactAdded,
    ContactData,
    ContactNotFound,
    ContactRemoved,
    ContactRepository,
    ContactService,
    ContactUpdated,
)
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository

__all__ = [
    "Contact",
    "ContactAdded",
    "ContactData",
    "ContactNotFound",
    "ContactRemoved",
    "ContactRepository",
    "ContactService",
    "ContactUpdated",
    "InMemoryContactRepository",
]
