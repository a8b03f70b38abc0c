"""In-memory implementation of ContactRepository (no DB)."""

import threading

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion.
    Ids come from a counter starting at 1 that is never rewound, so deleted ids are not reused.
    All operations hold a lock: FastAPI runs sync handlers on a thread pool.
    """

    def __init__(self) -> None:
        self._contacts: list[Contact] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def _index_of(self, contact_id: int) -> int | None:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return None

    def list_all(self) -> list[Contact]:
        with self._lock:
            return list(self._contacts)

    def get_by_id(self, contact_id: int) -> Contact | None:
        with self._lock:
            i = self._index_of(contact_id)
            return self._contacts[i] if i is not None else None

    def create(self, name: str, email: str) -> Contact:
        with self._lock:
            contact = Contact(id=self._next_id, name=name, email=email)
            self._next_id += 1
            self._contacts.append(contact)
            return contact

    def update(self, contact_id: int, name: str, email: str) -> bool:
        with self._lock:
            i = self._index_of(contact_id)
            if i is None:
                return False
            self._contacts[i] = Contact(id=contact_id, name=name, email=email)
            return True

    def delete(self, contact_id: int) -> bool:
        with self._lock:
            i = self._index_of(contact_id)
            if i is None:
                return False
            del self._contacts[i]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._contacts)
