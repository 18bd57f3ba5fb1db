"""Endpoints de notas: escenario completo, contrato de errores y aislamiento."""

import pytest


@pytest.fixture
def alice(register_user, auth_headers):
    return auth_headers(register_user("a@x.com", "secret1", "Alice"))


@pytest.fixture
def bob(register_user, auth_headers):
    return auth_headers(register_user("b@x.com", "secret2", "Bob"))


def _add(client, headers, title="T1", content="C1", **extra):
    r = client.post("/add-note", json={"title": title, "content": content, **extra}, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()["note"]


def test_full_scenario(client):
    r = client.post("/create-account", json={"fullName": "Alice", "email": "a@x.com", "password": "secret1"})
    assert r.status_code == 201

    r = client.post("/login", json={"email": "a@x.com", "password": "secret1"})
    assert r.status_code == 200
    headers = {"Authorization": f"Bearer {r.json()['accessToken']}"}

    r = client.post("/add-note", json={"title": "T1", "content": "C1"}, headers=headers)
    assert r.status_code == 200
    note = r.json()["note"]
    assert note["isPinned"] is False
    assert note["tags"] == []

    r = client.put(f"/update-note-pinned/{note['_id']}", json={"isPinned": True}, headers=headers)
    assert r.status_code == 200
    assert r.json()["note"]["isPinned"] is True

    r = client.get("/get-all-notes", headers=headers)
    notes = r.json()["notes"]
    assert len(notes) == 1
    assert notes[0]["isPinned"] is True

    r = client.delete(f"/delete-note/{note['_id']}", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"error": False, "message": "Note deleted successfully"}

    r = client.get("/get-all-notes", headers=headers)
    assert r.json()["notes"] == []


def test_add_note_shape(client, alice):
    note = _add(client, alice, tags=["work"])
    assert set(note) == {"_id", "title", "content", "tags", "isPinned", "userId", "createdOn", "updatedOn"}
    assert note["tags"] == ["work"]


def test_add_note_requires_title_and_content(client, alice):
    r = client.post("/add-note", json={"content": "C1"}, headers=alice)
    assert r.status_code == 400
    assert r.json()["message"] == "Title is required"
    r = client.post("/add-note", json={"title": "T1"}, headers=alice)
    assert r.status_code == 400
    assert r.json()["message"] == "Content is required"


def test_edit_note(client, alice):
    note = _add(client, alice)
    r = client.put(f"/edit-note/{note['_id']}", json={"tags": ["x"]}, headers=alice)
    assert r.status_code == 200
    edited = r.json()["note"]
    assert edited["tags"] == ["x"]
    assert edited["title"] == "T1"
    assert edited["content"] == "C1"


def test_edit_note_no_changes(client, alice):
    note = _add(client, alice)
    r = client.put(f"/edit-note/{note['_id']}", json={}, headers=alice)
    assert r.status_code == 400
    assert r.json()["message"] == "No changes provided"


def test_edit_note_not_found(client, alice):
    r = client.put("/edit-note/64b7f0c2a1b2c3d4e5f6ffff", json={"title": "x"}, headers=alice)
    assert r.status_code == 404


def test_pin_requires_boolean(client, alice):
    note = _add(client, alice)
    r = client.put(f"/update-note-pinned/{note['_id']}", json={}, headers=alice)
    assert r.status_code == 400
    assert r.json()["error"] is True


def test_delete_missing_note_is_400(client, alice):
    r = client.delete("/delete-note/64b7f0c2a1b2c3d4e5f6ffff", headers=alice)
    assert r.status_code == 400
    assert r.json()["message"] == "Note Not Found"


def test_list_pinned_first(client, alice):
    _add(client, alice, title="one")
    two = _add(client, alice, title="two")
    _add(client, alice, title="three")
    client.put(f"/update-note-pinned/{two['_id']}", json={"isPinned": True}, headers=alice)

    titles = [n["title"] for n in client.get("/get-all-notes", headers=alice).json()["notes"]]
    assert titles == ["two", "one", "three"]


def test_search(client, alice):
    _add(client, alice, title="Shopping", content="Buy MILK")
    _add(client, alice, title="Ideas", content="startup")

    r = client.get("/search-notes", params={"query": "milk"}, headers=alice)
    assert r.status_code == 200
    assert [n["title"] for n in r.json()["notes"]] == ["Shopping"]

    r = client.get("/search-notes/", params={"query": "IDEA"}, headers=alice)
    assert r.status_code == 200
    assert [n["title"] for n in r.json()["notes"]] == ["Ideas"]


def test_search_errors(client, alice):
    _add(client, alice)
    r = client.get("/search-notes", headers=alice)
    assert r.status_code == 400
    assert r.json()["message"] == "Search query is required"

    r = client.get("/search-notes", params={"query": "absent"}, headers=alice)
    assert r.status_code == 404
    assert r.json()["message"] == "No notes found matching the query"


def test_users_are_isolated(client, alice, bob):
    note = _add(client, alice, title="private", content="diary")
    note_id = note["_id"]

    assert client.put(f"/edit-note/{note_id}", json={"title": "x"}, headers=bob).status_code == 404
    assert client.put(f"/update-note-pinned/{note_id}", json={"isPinned": True}, headers=bob).status_code == 404
    assert client.delete(f"/delete-note/{note_id}", headers=bob).status_code == 400
    assert client.get("/get-all-notes", headers=bob).json()["notes"] == []
    assert client.get("/search-notes", params={"query": "diary"}, headers=bob).status_code == 404

    # Misma respuesta que para una nota inexistente
    foreign = client.put(f"/edit-note/{note_id}", json={"title": "x"}, headers=bob).json()
    missing = client.put("/edit-note/64b7f0c2a1b2c3d4e5f6ffff", json={"title": "x"}, headers=bob).json()
    assert foreign["message"] == missing["message"]

    (kept,) = client.get("/get-all-notes", headers=alice).json()["notes"]
    assert kept["title"] == "private"
    assert kept["isPinned"] is False
