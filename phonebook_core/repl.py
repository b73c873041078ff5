# phonebook_core/repl.py
"""
Interactive phonebook loop.

Run from the project root:

    python -m phonebook_core.repl

or through the `phonebook` console script. Reads one command per line
until `exit` or end of input.
"""

import logging
import sys
from typing import Optional

from phonebook_core import config
from phonebook_core.adapters.base import InputAdapter
from phonebook_core.adapters.text_adapter import CLITextAdapter
from phonebook_core.command_builder import CommandBuilder
from phonebook_core.contact_store import ContactStore
from phonebook_core.dispatcher import Dispatcher
from phonebook_core.messages import MessageCatalog, get_messages
from phonebook_core.skill_registry import SkillRegistry

from skills.contact_skill import ContactSkill
from skills.export_skill import ExportSkill
from skills.system_skill import SystemSkill

log = logging.getLogger(__name__)


def build_dispatcher(store: ContactStore, messages: MessageCatalog) -> Dispatcher:
    registry = SkillRegistry()
    registry.register(ContactSkill(store, messages=messages))
    registry.register(ExportSkill(store, messages=messages))
    registry.register(SystemSkill(messages=messages))
    log.debug("Registered skills: %s", registry.list_skills())
    return Dispatcher(registry=registry)


class Repl:
    def __init__(self, adapter: Optional[InputAdapter] = None,
                 store: Optional[ContactStore] = None,
                 messages: Optional[MessageCatalog] = None):
        self.adapter = adapter or CLITextAdapter()
        self.store = store if store is not None else ContactStore()
        self.messages = messages or get_messages()
        self.builder = CommandBuilder()
        self.dispatcher = build_dispatcher(self.store, self.messages)

    def _print_error(self) -> None:
        print(self.messages.get("common_error"))
        print(self.messages.get("help"))

    def step(self, raw_text: str) -> bool:
        """Handle one line. Returns False when the loop should stop."""
        command, issues = self.builder.build(raw_text, source="cli")
        if issues:
            log.debug("Parse issues for %r: %s", raw_text, issues)
            print(self.messages.get("common_error"))

        if not command.is_valid():
            self._print_error()
            return True

        print(command.describe(self.messages))
        result = self.dispatcher.execute(command)
        if not result.success:
            print(result.message)
            print(self.messages.get("help"))
            return True
        if result.data and result.data.get("exit"):
            return False
        if result.message:
            print(result.message)
        return True

    def run(self) -> int:
        while True:
            try:
                line = self.adapter.listen(self.messages.get("prompt"))
            except EOFError:
                print()
                log.debug("End of input, leaving")
                return 0
            if not self.step(line.text):
                return 0


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, config.PHONEBOOK_LOG_LEVEL, logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    return Repl().run()


if __name__ == "__main__":
    sys.exit(main())
