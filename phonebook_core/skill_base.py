# phonebook_core/skill_base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional
from phonebook_core.command import Command


@dataclass
class SkillResult:
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    code: Optional[int] = None


class SkillExecutionError(Exception):
    """Raised when a skill fails during execution."""
    pass


class Skill(ABC):
    """
    Skill contract (must be implemented by all skills).
    Skills only execute: the command has already been parsed and validated.
    """

    name: str = "base"

    @abstractmethod
    def can_handle(self, command: Command) -> bool:
        """Return True if this skill executes `command.intent`."""
        raise NotImplementedError

    @abstractmethod
    def execute(self, command: Command, context: Optional[Dict[str, Any]] = None) -> SkillResult:
        """
        Perform the command and return a SkillResult.
        Lookup misses are successful results, not failures.
        """
        raise NotImplementedError
