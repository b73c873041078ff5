# tests/test_json_writer.py
import json
import pytest
from phonebook_core.json_writer import JsonDocument, JsonWriter


def _alice():
    return JsonDocument().add("name", "alice").add("phone", ["+123"]).add("email", [])


def test_single_document_layout():
    text = JsonWriter(escape=False).render_array([_alice()])
    assert text == (
        '[\n'
        '  {\n'
        '    "name": "alice",\n'
        '    "phone": [\n'
        '      "+123"\n'
        '    ],\n'
        '    "email": []\n'
        '  }\n'
        ']'
    )


def test_multiple_documents_joined_with_comma_space():
    bob = JsonDocument().add("name", "bob").add("phone", []).add("email", ["b@c.de", "x@y.io"])
    text = JsonWriter(escape=False).render_array([_alice(), bob])
    assert "\n  }\n, \n  {\n" in text
    assert json.loads(text) == [
        {"name": "alice", "phone": ["+123"], "email": []},
        {"name": "bob", "phone": [], "email": ["b@c.de", "x@y.io"]},
    ]


def test_raw_strings_are_not_escaped_by_default():
    doc = JsonDocument().add("name", 'say "hi"')
    assert '"name": "say "hi""' in JsonWriter(escape=False).render_document(doc)


def test_escaping_when_enabled():
    doc = JsonDocument().add("name", 'say "hi"')
    text = JsonWriter(escape=True).render_array([doc])
    assert json.loads(text) == [{"name": 'say "hi"'}]


def test_document_keeps_insertion_order():
    doc = JsonDocument().add("b", "1").add("a", "2")
    assert [k for k, _ in doc.items()] == ["b", "a"]


def test_document_rejects_other_types():
    with pytest.raises(TypeError):
        JsonDocument().add("n", 1)
