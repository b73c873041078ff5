# phonebook_core/adapters/text_adapter.py
from typing import Iterable, Iterator

from phonebook_core.adapters.base import InputAdapter, AdapterOutput


class CLITextAdapter(InputAdapter):
    """
    Simple CLI text adapter. `listen()` blocks waiting for user input.
    """

    def listen(self, prompt: str = "") -> AdapterOutput:
        raw = input(prompt)
        return AdapterOutput(text=raw, source="cli", meta={"via": "stdin"})


class ScriptedTextAdapter(InputAdapter):
    """
    Feeds a fixed sequence of lines, then raises EOFError.
    Prompts are echoed to stdout like input() would.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)

    def listen(self, prompt: str = "") -> AdapterOutput:
        print(prompt, end="")
        try:
            raw = next(self._lines)
        except StopIteration:
            raise EOFError("script exhausted") from None
        return AdapterOutput(text=raw, source="script")
