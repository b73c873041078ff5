# phonebook_core/messages.py
"""
MessageCatalog: every user-facing string (help text, prompt, diagnostics).
Built-in defaults can be overridden key by key from a JSON/YAML file.
If the file is missing/invalid, falls back to the defaults.
"""

import os
import json
import threading
import logging
from typing import Any, Dict, Optional

import yaml

from phonebook_core import config

log = logging.getLogger(__name__)

HELP_MESSAGE = """Перечень команд:

exit - прекращение работы

help - справка

add <Имя> phone <Номер телефона>
- сохранение записи с введенными именем и номером телефона
  или добавление нового номера телефона к уже имеющейся
  записи

add <Имя> email <Адрес электронной почты>
- сохранение записи с введенными именем и адрес
  электронной почты или добавление нового адреса
  электронной почты к уже имеющейся записи

show <Имя>
- выводит по введенному имени его телефоны
  и адреса электронной почты

find <параметр>
- выводит по введенному параметру (телефон или E-mail) имеющиеся записи

export </path/file.json>
- экспорт значений в JSON файл в директории </path/<file.json>"""

_default: Dict[str, str] = {
    "help": HELP_MESSAGE,
    "common_error": "Ошибка! Команда введена неверно. Список команд ниже",
    "prompt": '\nВведите "help" для помощи\nили команду: ',
    "not_initialized": "Phonebook is not initialized",
    "name_not_found": "Person with name {name} was not found",
    "value_not_found": "Person with {value} was not found",
    "export_done": "JSON file {path} was created",
    "export_failed": "Export to {path} failed: {error}",
    "person_label": "Пользователь: ",
    "phones_label": "phone(s): ",
    "emails_label": "email(s): ",
    # echo lines printed before a command executes
    "echo_add_phone": "Введена команда записи нового пользователя {name} с номером телефона {value}",
    "echo_add_email": "Введена команда записи нового пользователя {name} с адресом электронной почты {value}",
    "echo_show": 'Введена команда "show"',
    "echo_find": 'Введена команда "find"',
    "echo_export": 'Введена команда "export"',
    "echo_help": "Вывод справочной информации",
    "echo_exit": 'Введена команда "exit"',
}


class MessageCatalog:
    def __init__(self, path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        self.path = path or config.PHONEBOOK_MESSAGES_PATH
        self._lock = threading.RLock()
        self._messages: Dict[str, str] = dict(_default)
        self._overrides = dict(overrides or {})
        self.reload()

    def _read_file(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
            if self.path.lower().endswith((".yml", ".yaml")):
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text)
        except (OSError, ValueError, yaml.YAMLError) as e:
            log.warning("MessageCatalog load error: %s", e)
            return {}
        if not isinstance(data, dict):
            log.warning("MessageCatalog: %s is not a mapping, ignored", self.path)
            return {}
        return data

    def reload(self) -> None:
        with self._lock:
            messages = dict(_default)
            data = self._read_file()
            if data:
                log.info("MessageCatalog: loaded messages from %s", self.path)
            for key, value in list(data.items()) + list(self._overrides.items()):
                if key not in _default:
                    log.warning("MessageCatalog: unknown key %r ignored", key)
                    continue
                messages[key] = str(value)
            self._messages = messages

    def get(self, key: str) -> str:
        return self._messages[key]

    def format(self, key: str, **kwargs: Any) -> str:
        """Fill a template; a broken override falls back to the built-in one."""
        try:
            return self._messages[key].format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            log.warning("MessageCatalog: template %r unusable (%r), using default", key, e)
            return _default[key].format(**kwargs)


# module-level singleton for easy imports
_catalog = None


def get_messages() -> MessageCatalog:
    global _catalog
    if _catalog is None:
        _catalog = MessageCatalog()
    return _catalog
