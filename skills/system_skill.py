# skills/system_skill.py
from typing import Optional, Dict, Any

from phonebook_core.skill_base import Skill, SkillResult
from phonebook_core.command import Command
from phonebook_core.messages import MessageCatalog, get_messages


class SystemSkill(Skill):
    """help and exit."""

    name = "system"

    def __init__(self, messages: Optional[MessageCatalog] = None):
        self.messages = messages or get_messages()

    def can_handle(self, command: Command) -> bool:
        return command.intent in ("help", "exit")

    def execute(self, command: Command, context: Optional[Dict[str, Any]] = None) -> SkillResult:
        if command.intent == "exit":
            # the REPL stops on this flag; nothing to clean up
            return SkillResult(True, "", {"exit": True}, code=0)
        return SkillResult(True, self.messages.get("help"))
