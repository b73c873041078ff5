# phonebook_core/command_builder.py
from typing import List, Optional, Tuple

from phonebook_core.command import Command


class CommandBuilder:
    """
    Build Command objects from raw input lines.

    `build()` never raises: shape problems are reported as issues
    ("kind:detail" strings) and the returned command falls back to `help`.
    Pattern validation is left to Command.is_valid().
    """

    CONTACT_KEYWORDS = {"phone": "add_phone", "email": "add_email"}

    # commands taking exactly one positional argument -> entity key
    SINGLE_ARG = {"show": "name", "find": "value", "export": "path"}

    NO_ARG = ("help", "exit")

    @staticmethod
    def tokenize(raw_text: str) -> List[str]:
        # runs of whitespace collapse; "add  bob phone +1" == "add bob phone +1"
        return (raw_text or "").lower().split()

    def build(self, raw_text: str, source: Optional[str] = None) -> Tuple[Command, List[str]]:
        """
        Convert one input line into (Command, issues).
        issues == [] means the line had a usable shape.
        """
        source = source or "text"
        tokens = self.tokenize(raw_text)
        if not tokens:
            return self._fallback(["empty_input"], source)

        verb = tokens[0]
        if verb == "add":
            return self._build_add(tokens, source)

        if verb in self.SINGLE_ARG:
            if len(tokens) < 2:
                return self._fallback([f"missing_argument:{verb}"], source)
            return Command(intent=verb, entities={self.SINGLE_ARG[verb]: tokens[1]}, source=source), []

        if verb in self.NO_ARG:
            return Command(intent=verb, source=source), []

        return self._fallback([f"unknown_command:{verb}"], source)

    def _build_add(self, tokens: List[str], source: str) -> Tuple[Command, List[str]]:
        if len(tokens) <= 3:
            return self._fallback(["too_few_tokens:add"], source)

        entry = tokens[1:]
        present = [k for k in self.CONTACT_KEYWORDS if k in entry]
        if len(present) != 1:
            return self._fallback(["ambiguous_contact_type" if present else "missing_contact_type"], source)

        keyword = present[0]
        kw_index = entry.index(keyword)
        if kw_index + 1 >= len(entry):
            return self._fallback([f"missing_value:{keyword}"], source)
        value_index = kw_index + 1

        # name is the first token that is neither the keyword nor its value,
        # so "add phone +1 bob" works as well as "add bob phone +1"
        name = next(t for i, t in enumerate(entry) if i not in (kw_index, value_index))

        cmd = Command(
            intent=self.CONTACT_KEYWORDS[keyword],
            entities={"entry": entry, "name": name, "value": entry[value_index]},
            source=source,
        )
        return cmd, []

    @staticmethod
    def _fallback(issues: List[str], source: str) -> Tuple[Command, List[str]]:
        return Command(intent="help", source=source, meta={"issues": list(issues)}), issues
