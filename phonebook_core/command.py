# phonebook_core/command.py
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional
import json

from phonebook_core.validators import is_valid_phone, is_valid_email
from phonebook_core.messages import MessageCatalog, get_messages

INTENTS = ("add_phone", "add_email", "show", "find", "export", "help", "exit")

# entry data is [name, keyword, value] at most
MAX_ENTRY_TOKENS = 3


@dataclass
class Command:
    """
    Phonebook command: one per input line, tagged by `intent`.
    Validation lives here; execution lives in the skill that handles the intent.
    """
    intent: str                     # one of INTENTS
    entities: Dict[str, Any] = field(default_factory=dict)  # name / value / path / entry
    source: str = "text"            # "cli", "test", ...
    meta: Dict[str, Any] = field(default_factory=dict)

    def is_valid(self) -> bool:
        if self.intent not in INTENTS:
            return False
        if not isinstance(self.entities, dict):
            return False
        if self.intent == "add_phone":
            return is_valid_phone(self.get("value")) and self._entry_fits()
        if self.intent == "add_email":
            return is_valid_email(self.get("value")) and self._entry_fits()
        # show / find / export / help / exit are always valid
        return True

    def _entry_fits(self) -> bool:
        entry = self.get("entry") or []
        return len(entry) <= MAX_ENTRY_TOKENS

    def describe(self, messages: Optional[MessageCatalog] = None) -> str:
        """Echo line printed before the command executes."""
        msgs = messages or get_messages()
        return msgs.format("echo_" + self.intent, name=self.get("name"), value=self.get("value"))

    def to_json(self) -> str:
        """Serialize to stable JSON (used in dispatcher debug logs)."""
        return json.dumps(asdict(self), ensure_ascii=False, sort_keys=True)

    def get(self, key: str, default=None):
        return self.entities.get(key, default)

    def __repr__(self):
        return f"Command(intent={self.intent!r}, entities={self.entities!r}, source={self.source!r})"
