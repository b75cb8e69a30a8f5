from sqlmodel import Session, select

from tasktracker.models.task import Task
from tasktracker.models.user import User


def _create(client, headers, **overrides):
    payload = {
        "title": "Write report",
        "description": "Q3",
        "dueDate": "2024-01-01T00:00:00",
    }
    payload.update(overrides)
    res = client.post("/tasks", json=payload, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


def test_create_defaults_status_and_stamps_owner(client, register):
    user_id, headers = register("alice@example.com")

    task = _create(client, headers)

    assert task["status"] == "To Do"
    assert task["userId"] == user_id
    assert task["title"] == "Write report"
    assert task["description"] == "Q3"
    assert task["dueDate"].startswith("2024-01-01T00:00:00")
    assert {"id", "createdAt", "updatedAt"} <= set(task)


def test_create_accepts_bare_date(client, register):
    _, headers = register("alice@example.com")

    task = _create(client, headers, dueDate="2024-01-01")

    assert task["dueDate"].startswith("2024-01-01T00:00:00")


def test_create_rejects_client_supplied_owner(client, register):
    _, headers = register("alice@example.com")

    res = client.post(
        "/tasks",
        json={"title": "t", "description": "d", "dueDate": "2024-01-01", "userId": 42},
        headers=headers,
    )

    assert res.status_code == 400


def test_create_rejects_unknown_status(client, register):
    _, headers = register("alice@example.com")

    res = client.post(
        "/tasks",
        json={"title": "t", "description": "d", "dueDate": "2024-01-01", "status": "Done"},
        headers=headers,
    )

    assert res.status_code == 400


def test_tasks_require_authentication(client):
    assert client.get("/tasks").status_code == 401
    assert client.post("/tasks", json={}).status_code == 401
    assert client.get("/tasks/1").status_code == 401
    assert client.put("/tasks/1", json={}).status_code == 401
    assert client.delete("/tasks/1").status_code == 401


def test_status_filter_is_scoped_to_owner(client, register):
    alice_id, alice = register("alice@example.com")
    _, bob = register("bob@example.com")
    created = _create(client, alice)
    _create(client, alice, title="Ship it", status="In Progress")

    res = client.get("/tasks", params={"status": "To Do"}, headers=alice)
    assert res.status_code == 200
    assert [t["id"] for t in res.json()] == [created["id"]]

    res = client.get("/tasks", params={"status": "To Do"}, headers=bob)
    assert res.status_code == 200
    assert res.json() == []


def test_other_owner_gets_not_found(client, register):
    _, alice = register("alice@example.com")
    _, bob = register("bob@example.com")
    task = _create(client, alice)
    path = f"/tasks/{task['id']}"

    for res in (
        client.get(path, headers=bob),
        client.put(path, json={"status": "Completed"}, headers=bob),
        client.delete(path, headers=bob),
    ):
        assert res.status_code == 404
        assert res.json() == {"detail": "Task not found"}

    # untouched
    assert client.get(path, headers=alice).json()["status"] == "To Do"


def test_get_missing_task_is_not_found(client, register):
    _, headers = register("alice@example.com")

    assert client.get("/tasks/12345", headers=headers).status_code == 404


def test_partial_update_changes_only_given_fields(client, register):
    _, headers = register("alice@example.com")
    task = _create(client, headers)

    res = client.put(f"/tasks/{task['id']}", json={"status": "Completed"}, headers=headers)

    assert res.status_code == 200
    updated = res.json()
    assert updated["status"] == "Completed"
    for field in ("title", "description", "dueDate", "userId", "createdAt"):
        assert updated[field] == task[field]


def test_update_rejects_null_and_unknown_fields(client, register):
    _, headers = register("alice@example.com")
    task = _create(client, headers)
    path = f"/tasks/{task['id']}"

    assert client.put(path, json={"title": None}, headers=headers).status_code == 400
    assert client.put(path, json={"owner": "bob"}, headers=headers).status_code == 400


def test_delete_twice_second_is_not_found(client, register):
    _, headers = register("alice@example.com")
    task = _create(client, headers)
    path = f"/tasks/{task['id']}"

    first = client.delete(path, headers=headers)
    assert first.status_code == 204
    assert first.content == b""

    assert client.delete(path, headers=headers).status_code == 404
    assert client.get(path, headers=headers).status_code == 404


def test_default_order_is_newest_first(client, register):
    _, headers = register("alice@example.com")
    ids = [_create(client, headers, title=f"task {i}")["id"] for i in range(3)]

    res = client.get("/tasks", headers=headers)
    assert [t["id"] for t in res.json()] == list(reversed(ids))

    res = client.get("/tasks", params={"sortBy": "bogusField"}, headers=headers)
    assert res.status_code == 200
    assert [t["id"] for t in res.json()] == list(reversed(ids))


def test_sort_by_allowed_field_and_direction(client, register):
    _, headers = register("alice@example.com")
    _create(client, headers, title="banana", dueDate="2024-03-01")
    _create(client, headers, title="apple", dueDate="2024-02-01")
    _create(client, headers, title="cherry", dueDate="2024-01-01")

    res = client.get("/tasks", params={"sortBy": "title"}, headers=headers)
    assert [t["title"] for t in res.json()] == ["apple", "banana", "cherry"]

    res = client.get("/tasks", params={"sortBy": "title", "sortOrder": "DESC"}, headers=headers)
    assert [t["title"] for t in res.json()] == ["cherry", "banana", "apple"]

    res = client.get("/tasks", params={"sortBy": "dueDate", "sortOrder": "bogus"}, headers=headers)
    assert [t["title"] for t in res.json()] == ["cherry", "apple", "banana"]


def test_deleting_user_cascades_to_tasks(client, app, register):
    user_id, headers = register("alice@example.com")
    _create(client, headers)
    _create(client, headers, title="second")

    with Session(app.state.engine) as s:
        s.delete(s.get(User, user_id))
        s.commit()
        assert s.exec(select(Task)).all() == []


def test_aware_due_date_is_stored_as_utc_instant(client, register):
    _, headers = register("alice@example.com")

    task = _create(client, headers, dueDate="2024-01-01T00:00:00+02:00")
    assert task["dueDate"].startswith("2023-12-31T22:00:00")

    res = client.put(
        f"/tasks/{task['id']}", json={"dueDate": "2024-06-01T12:30:00Z"}, headers=headers
    )
    assert res.json()["dueDate"].startswith("2024-06-01T12:30:00")

    fetched = client.get(f"/tasks/{task['id']}", headers=headers).json()
    assert fetched["dueDate"].startswith("2024-06-01T12:30:00")


def test_out_of_range_task_id_is_not_found(client, register):
    _, headers = register("alice@example.com")
    path = "/tasks/99999999999999999999"

    assert client.get(path, headers=headers).status_code == 404
    assert client.put(path, json={"status": "Completed"}, headers=headers).status_code == 404
    assert client.delete(path, headers=headers).status_code == 404


def test_sort_order_must_be_exact_desc(client, register):
    _, headers = register("alice@example.com")
    _create(client, headers, title="a")
    _create(client, headers, title="b")

    res = client.get("/tasks", params={"sortBy": "title", "sortOrder": "desc"}, headers=headers)

    assert [t["title"] for t in res.json()] == ["a", "b"]
