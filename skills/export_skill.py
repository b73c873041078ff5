# skills/export_skill.py
from pathlib import Path
from typing import Optional, Dict, Any, List

from phonebook_core.skill_base import Skill, SkillResult
from phonebook_core.command import Command
from phonebook_core.contact_store import ContactStore, Person
from phonebook_core.json_writer import JsonDocument, JsonWriter
from phonebook_core.messages import MessageCatalog, get_messages


def person_document(person: Person) -> JsonDocument:
    # both lists are always written, "[]" when empty
    return (JsonDocument()
            .add("name", person.name)
            .add("phone", list(person.phones))
            .add("email", list(person.emails)))


class ExportSkill(Skill):
    name = "export"

    def __init__(self, store: ContactStore, writer: Optional[JsonWriter] = None,
                 messages: Optional[MessageCatalog] = None):
        self.store = store
        self.writer = writer or JsonWriter()
        self.messages = messages or get_messages()

    def can_handle(self, command: Command) -> bool:
        return command.intent == "export"

    def render(self) -> str:
        docs: List[JsonDocument] = [person_document(p) for p in self.store.persons()]
        return self.writer.render_array(docs)

    def execute(self, command: Command, context: Optional[Dict[str, Any]] = None) -> SkillResult:
        path = command.get("path")
        if self.store.is_empty():
            return SkillResult(True, self.messages.get("not_initialized"), {"written": False})

        text = self.render()
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as ex:
            return SkillResult(False, self.messages.format("export_failed", path=path, error=ex),
                               {"written": False, "error": ex})
        return SkillResult(True, self.messages.format("export_done", path=path),
                           {"written": True, "path": path, "count": len(self.store)})
