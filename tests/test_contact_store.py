# tests/test_contact_store.py
from phonebook_core.contact_store import ContactStore, Person
from phonebook_core.messages import MessageCatalog


def test_new_name_creates_person_with_empty_other_list():
    store = ContactStore()
    p = store.add_phone("alice", "+1")
    assert p == Person("alice", phones=["+1"], emails=[])
    e = store.add_email("bob", "b@c.de")
    assert e.phones == [] and e.emails == ["b@c.de"]
    assert len(store) == 2


def test_adding_to_one_name_does_not_touch_another():
    store = ContactStore()
    store.add_phone("alice", "+1")
    store.add_phone("bob", "+2")
    store.add_phone("alice", "+3")
    assert store.get("bob").phones == ["+2"]
    assert store.get("alice").phones == ["+1", "+3"]


def test_duplicates_kept_in_order():
    store = ContactStore()
    store.add_phone("alice", "+1")
    store.add_phone("alice", "+2")
    store.add_phone("alice", "+1")
    assert store.get("alice").phones == ["+1", "+2", "+1"]


def test_find_is_exact_match_on_phone_or_email():
    store = ContactStore()
    store.add_phone("alice", "+123")
    store.add_email("bob", "b@c.de")
    store.add_phone("carol", "+1234")
    assert [p.name for p in store.find("+123")] == ["alice"]
    assert [p.name for p in store.find("b@c.de")] == ["bob"]
    assert store.find("+12") == []


def test_find_returns_every_match_in_insertion_order():
    store = ContactStore()
    store.add_phone("bob", "+1")
    store.add_email("alice", "a@b.co")
    store.add_phone("alice", "+1")
    assert [p.name for p in store.find("+1")] == ["bob", "alice"]


def test_empty_store():
    store = ContactStore()
    assert store.is_empty()
    assert "alice" not in store
    assert store.get("alice") is None


def test_render_capitalizes_and_skips_empty_lists(tmp_path):
    msgs = MessageCatalog(path=str(tmp_path / "none.yaml"))
    p = Person("alice", phones=["+1", "+2"], emails=[])
    assert p.render(msgs) == "Пользователь: Alice\n\tphone(s): +1, +2\n"
    q = Person("bob", phones=["+1"], emails=["b@c.de"])
    assert q.render(msgs) == "Пользователь: Bob\n\tphone(s): +1\n\temail(s): b@c.de\n"
