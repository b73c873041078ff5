# skills/contact_skill.py
from typing import Optional, Dict, Any

from phonebook_core.skill_base import Skill, SkillResult, SkillExecutionError
from phonebook_core.command import Command
from phonebook_core.contact_store import ContactStore
from phonebook_core.messages import MessageCatalog, get_messages


class ContactSkill(Skill):
    """Add-Phone, Add-Email, Show and Find against one ContactStore."""

    name = "contacts"
    INTENTS = ("add_phone", "add_email", "show", "find")

    def __init__(self, store: ContactStore, messages: Optional[MessageCatalog] = None):
        self.store = store
        self.messages = messages or get_messages()

    def can_handle(self, command: Command) -> bool:
        return command.intent in self.INTENTS

    def execute(self, command: Command, context: Optional[Dict[str, Any]] = None) -> SkillResult:
        if command.intent not in self.INTENTS:
            raise SkillExecutionError(f"ContactSkill cannot execute intent '{command.intent}'")
        handler = getattr(self, "_" + command.intent)
        return handler(command)

    # no re-validation here: the dispatcher only lets valid commands through
    def _add_phone(self, command: Command) -> SkillResult:
        person = self.store.add_phone(command.get("name"), command.get("value"))
        return SkillResult(True, "", {"person": person})

    def _add_email(self, command: Command) -> SkillResult:
        person = self.store.add_email(command.get("name"), command.get("value"))
        return SkillResult(True, "", {"person": person})

    def _show(self, command: Command) -> SkillResult:
        name = command.get("name")
        if self.store.is_empty():
            return SkillResult(True, self.messages.get("not_initialized"), {"found": False})
        person = self.store.get(name)
        if person is None:
            return SkillResult(True, self.messages.format("name_not_found", name=name), {"found": False})
        return SkillResult(True, person.render(self.messages), {"found": True, "persons": [person]})

    def _find(self, command: Command) -> SkillResult:
        value = command.get("value")
        if self.store.is_empty():
            return SkillResult(True, self.messages.get("not_initialized"), {"found": False})
        persons = self.store.find(value)
        if not persons:
            return SkillResult(True, self.messages.format("value_not_found", value=value), {"found": False})
        text = "\n".join(p.render(self.messages) for p in persons)
        return SkillResult(True, text, {"found": True, "persons": persons})
