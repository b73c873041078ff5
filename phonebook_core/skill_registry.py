# phonebook_core/skill_registry.py
from typing import List, Optional
import logging

from phonebook_core.skill_base import Skill
from phonebook_core.command import Command

log = logging.getLogger(__name__)


class SkillRegistry:
    """
    Simple registry to hold available skills and find the one that can handle a Command.
    """

    def __init__(self):
        self._skills: List[Skill] = []

    def register(self, skill: Skill) -> None:
        if any(s.name == skill.name for s in self._skills):
            raise ValueError(f"Skill with name '{skill.name}' already registered")
        self._skills.append(skill)

    def find_handler(self, command: Command) -> Optional[Skill]:
        """
        Returns the first skill that claims it can handle the command.
        Registry order determines priority.
        """
        for skill in self._skills:
            try:
                if skill.can_handle(command):
                    return skill
            except Exception:
                # can_handle must not crash; skip the skill if it does
                log.warning("Skill %r crashed in can_handle", skill.name, exc_info=True)
                continue
        return None

    def list_skills(self) -> List[str]:
        return [s.name for s in self._skills]
