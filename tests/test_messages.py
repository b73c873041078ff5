# tests/test_messages.py
import json
from pathlib import Path
from phonebook_core.messages import MessageCatalog, HELP_MESSAGE

ROOT = Path(__file__).resolve().parent.parent


def test_defaults_when_file_missing(tmp_path):
    msgs = MessageCatalog(path=str(tmp_path / "nope.yaml"))
    assert msgs.get("help") == HELP_MESSAGE
    assert msgs.format("name_not_found", name="bob") == "Person with name bob was not found"


def test_yaml_override(tmp_path):
    f = tmp_path / "m.yaml"
    f.write_text("common_error: Oops\nbogus_key: ignored\n", encoding="utf-8")
    msgs = MessageCatalog(path=str(f))
    assert msgs.get("common_error") == "Oops"
    assert msgs.get("not_initialized") == "Phonebook is not initialized"


def test_json_override_and_reload(tmp_path):
    f = tmp_path / "m.json"
    f.write_text(json.dumps({"export_done": "saved {path}"}), encoding="utf-8")
    msgs = MessageCatalog(path=str(f))
    assert msgs.format("export_done", path="x.json") == "saved x.json"
    f.write_text(json.dumps({"export_done": "wrote {path}"}), encoding="utf-8")
    msgs.reload()
    assert msgs.format("export_done", path="x.json") == "wrote x.json"


def test_invalid_file_falls_back(tmp_path):
    f = tmp_path / "m.yaml"
    f.write_text("- just\n- a list\n", encoding="utf-8")
    msgs = MessageCatalog(path=str(f))
    assert msgs.get("help") == HELP_MESSAGE


def test_explicit_overrides_win(tmp_path):
    f = tmp_path / "m.yaml"
    f.write_text("prompt: from file\n", encoding="utf-8")
    msgs = MessageCatalog(path=str(f), overrides={"prompt": "> "})
    assert msgs.get("prompt") == "> "


def test_shipped_english_catalog_loads():
    msgs = MessageCatalog(path=str(ROOT / "config" / "messages.en.yaml"))
    assert msgs.get("help").startswith("Commands:")
    assert msgs.format("echo_add_phone", name="bob", value="+1") == \
        "Received command to add bob with phone number +1"


def test_broken_override_template_falls_back_to_default(tmp_path):
    f = tmp_path / "m.yaml"
    f.write_text("echo_add_phone: 'added {foo}'\nexport_done: 'saved {0}'\n", encoding="utf-8")
    msgs = MessageCatalog(path=str(f))
    assert msgs.format("echo_add_phone", name="bob", value="+1") == \
        "Введена команда записи нового пользователя bob с номером телефона +1"
    assert msgs.format("export_done", path="x.json") == "JSON file x.json was created"
