# File: phonebook_core/dispatcher.py
from typing import Optional, Dict, Any
import logging
import traceback

from phonebook_core.skill_registry import SkillRegistry
from phonebook_core.command import Command
from phonebook_core.skill_base import SkillResult

log = logging.getLogger(__name__)

# SkillResult.code values set by the dispatcher
CODE_INVALID = 2
CODE_NO_HANDLER = 3
CODE_SKILL_ERROR = 4


class DispatchError(Exception):
    """Raised for dispatcher-level misuse (not a Command)."""
    pass


class Dispatcher:
    """
    Responsibilities:
    - Accept Command objects
    - Refuse commands that fail Command.is_valid()
    - Ask SkillRegistry for a handler and execute it
    - Return SkillResult (or a normalized failure result); skill exceptions
      never escape to the caller
    """

    def __init__(self, registry: Optional[SkillRegistry] = None):
        self.registry = registry or SkillRegistry()

    def execute(self, command: Command, context: Optional[Dict[str, Any]] = None) -> SkillResult:
        if not isinstance(command, Command):
            raise DispatchError("Invalid command object")

        if not command.is_valid():
            log.debug("Dispatcher: refusing invalid %r", command)
            return SkillResult(False, f"Command '{command.intent}' failed validation", code=CODE_INVALID)

        handler = self.registry.find_handler(command)
        if handler is None:
            return SkillResult(False, f"No skill registered to handle intent '{command.intent}'",
                               code=CODE_NO_HANDLER)

        try:
            result = handler.execute(command, context=context or {})
            if not isinstance(result, SkillResult):
                return SkillResult(False, f"Skill '{handler.name}' returned invalid result type",
                                   code=CODE_SKILL_ERROR)
        except Exception as exc:
            log.warning("Skill %r failed on %r: %s", handler.name, command, exc)
            tb = traceback.format_exc()
            return SkillResult(False, f"Skill '{handler.name}' raised exception: {exc}",
                               {"traceback": tb, "error": exc}, code=CODE_SKILL_ERROR)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Dispatcher: %s -> success=%s", command.to_json(), result.success)
        return result
