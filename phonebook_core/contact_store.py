# phonebook_core/contact_store.py
"""
In-memory record store for the phonebook session.

Nothing here touches disk: the store lives as long as the REPL that owns it.
Export is a separate skill that only reads from it.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from phonebook_core.messages import MessageCatalog, get_messages

log = logging.getLogger(__name__)


@dataclass
class Person:
    name: str
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)

    def display_name(self) -> str:
        # only the first character changes; the key itself stays lower-case
        return self.name[:1].upper() + self.name[1:]

    def has_contact(self, value: str) -> bool:
        return value in self.phones or value in self.emails

    def render(self, messages: Optional[MessageCatalog] = None) -> str:
        """Human readable record, empty contact lists are skipped."""
        msgs = messages or get_messages()
        parts = [msgs.get("person_label") + self.display_name()]
        if self.phones:
            parts.append("\n\t" + msgs.get("phones_label") + ", ".join(self.phones))
        if self.emails:
            parts.append("\n\t" + msgs.get("emails_label") + ", ".join(self.emails))
        parts.append("\n")
        return "".join(parts)

    def __str__(self):
        return self.render()


class ContactStore:
    """
    Mapping name -> Person. Entries are created on the first add for a name
    and mutated in place afterwards; there is no delete.
    """

    def __init__(self):
        self._persons: Dict[str, Person] = {}

    def add_phone(self, name: str, phone: str) -> Person:
        person = self._persons.get(name)
        if person is None:
            person = Person(name, phones=[phone], emails=[])
            self._persons[name] = person
            log.debug("ContactStore: created %r with phone %r", name, phone)
        else:
            person.phones.append(phone)
            log.debug("ContactStore: appended phone %r to %r", phone, name)
        return person

    def add_email(self, name: str, email: str) -> Person:
        person = self._persons.get(name)
        if person is None:
            person = Person(name, phones=[], emails=[email])
            self._persons[name] = person
            log.debug("ContactStore: created %r with email %r", name, email)
        else:
            person.emails.append(email)
            log.debug("ContactStore: appended email %r to %r", email, name)
        return person

    def get(self, name: str) -> Optional[Person]:
        return self._persons.get(name)

    def find(self, value: str) -> List[Person]:
        """Every person whose phone or email list holds `value` exactly."""
        return [p for p in self._persons.values() if p.has_contact(value)]

    def persons(self) -> List[Person]:
        return list(self._persons.values())

    def is_empty(self) -> bool:
        return not self._persons

    def __contains__(self, name) -> bool:
        return name in self._persons

    def __len__(self) -> int:
        return len(self._persons)
