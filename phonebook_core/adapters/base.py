# phonebook_core/adapters/base.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from abc import ABC, abstractmethod
import datetime


def _utc_now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


@dataclass
class AdapterOutput:
    """
    Standard output from any input adapter.
    - text: the raw line as typed (no parsing)
    - source: "cli" | "script" | custom
    - meta: adapter-specific metadata
    - timestamp: ISO timestamp when the line was read
    """
    text: str
    source: str
    meta: Optional[Dict[str, Any]] = None
    timestamp: str = field(default_factory=_utc_now)


class InputAdapter(ABC):
    """
    Adapter contract: listen() returns AdapterOutput synchronously.
    Adapters MUST NOT interpret the text or create Command objects.
    Raise EOFError when no more input will arrive.
    """

    @abstractmethod
    def listen(self, prompt: str = "") -> AdapterOutput:
        """Blocking call that returns AdapterOutput."""
        raise NotImplementedError
