from sqlmodel import SQLModel

TEST_TODO = {"title": "Test Todo", "description": "This is a test todo item"}
ODD_TODO = {"title": "Odd Todo", "description": "This is an odd todo item"}


def create_todo(client, payload=TEST_TODO):
    res = client.post("/api/todos", json=payload)
    assert res.status_code == 201
    return res.json()


def assert_todo_shape(todo: dict):
    for key in ["id", "title", "description", "completed", "created_at", "tags"]:
        assert key in todo
    assert isinstance(todo["id"], int)
    assert isinstance(todo["completed"], bool)
    assert isinstance(todo["tags"], list)


class TestHealth:
    def test_health(self, client):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestTodosCRUD:
    def test_create_todo(self, client):
        todo = create_todo(client)
        assert_todo_shape(todo)
        assert todo["title"] == TEST_TODO["title"]
        assert todo["description"] == TEST_TODO["description"]
        assert todo["completed"] is False
        assert todo["tags"] == []

    def test_list_todos_is_a_list(self, client):
        assert client.get("/api/todos").json() == []
        create_todo(client)
        res = client.get("/api/todos")
        assert res.status_code == 200
        assert isinstance(res.json(), list)
        assert len(res.json()) == 1

    def test_get_todo_and_not_found(self, client):
        tid = create_todo(client)["id"]

        res = client.get(f"/api/todos/{tid}")
        assert res.status_code == 200
        assert res.json()["id"] == tid

        res_404 = client.get("/api/todos/999999")
        assert res_404.status_code == 404
        assert res_404.json()["detail"] == "Todo not found."

    def test_search_by_title(self, client):
        created = create_todo(client)
        create_todo(client, ODD_TODO)

        res = client.get("/api/todos/search/" + created["title"])
        assert res.status_code == 200
        todos = res.json()
        assert len(todos) == 1
        assert todos[0]["title"] == created["title"]

        assert len(client.get("/api/todos/search/todo").json()) == 2
        assert client.get("/api/todos/search/nothing").json() == []

    def test_put_updates_title_and_description(self, client):
        tid = create_todo(client)["id"]
        updated = {"title": "Updated Title", "description": "Updated Description"}

        res = client.put(f"/api/todos/{tid}", json=updated)
        assert res.status_code == 200
        assert res.json()["title"] == updated["title"]
        assert res.json()["description"] == updated["description"]

    def test_patch_is_partial(self, client):
        tid = create_todo(client)["id"]
        res = client.patch(f"/api/todos/{tid}", json={"completed": True})
        assert res.status_code == 200
        assert res.json()["completed"] is True
        assert res.json()["title"] == TEST_TODO["title"]

    def test_update_not_found(self, client):
        res = client.put("/api/todos/424242", json={"title": "Nope"})
        assert res.status_code == 404
        assert res.json()["detail"] == "Todo not found."

    def test_delete_todo(self, client):
        tid = create_todo(client)["id"]

        res_del = client.delete(f"/api/todos/{tid}")
        assert res_del.status_code == 204
        assert res_del.text == ""

        assert client.get(f"/api/todos/{tid}").status_code == 404
        assert client.delete(f"/api/todos/{tid}").status_code == 404

    def test_end_to_end_scenario(self, client):
        res = client.post("/api/todos", json={"title": "Test Todo", "description": "d"})
        assert res.status_code == 201
        assert res.json()["title"] == "Test Todo"
        tid = res.json()["id"]

        res = client.get(f"/api/todos/{tid}")
        assert res.status_code == 200
        assert res.json()["title"] == "Test Todo"

        res = client.put(f"/api/todos/{tid}", json={"title": "Updated"})
        assert res.status_code == 200
        assert res.json()["title"] == "Updated"
        assert res.json()["description"] == "d"

        assert client.delete(f"/api/todos/{tid}").status_code == 204
        assert client.get(f"/api/todos/{tid}").status_code == 404


class TestTodoTags:
    def test_add_tag_and_filter(self, client):
        work = create_todo(client)["id"]
        home = create_todo(client, ODD_TODO)["id"]

        res = client.post(f"/api/todos/{work}/tags", json={"tag": "work"})
        assert res.status_code == 201
        assert res.json()["todo_id"] == work
        client.post(f"/api/todos/{home}/tags", json={"tag": "home"})

        todo = client.get(f"/api/todos/{work}").json()
        assert [t["tag"] for t in todo["tags"]] == ["work"]

        tagged = client.get("/api/todos/tag/home").json()
        assert [t["id"] for t in tagged] == [home]

        listed = {t["id"]: [tag["tag"] for tag in t["tags"]] for t in client.get("/api/todos").json()}
        assert listed == {work: ["work"], home: ["home"]}

    def test_add_tag_to_unknown_todo(self, client):
        res = client.post("/api/todos/777/tags", json={"tag": "x"})
        assert res.status_code == 404


class TestErrors:
    def test_missing_title_is_400(self, client):
        res = client.post("/api/todos", json={"description": "no title"})
        assert res.status_code == 400
        assert res.json() == {"detail": "Invalid or missing field"}
        # rien n'a été écrit
        assert client.get("/api/todos").json() == []

    def test_wrong_type_is_422(self, client):
        res = client.put("/api/todos/1", json={"completed": "not-a-bool"})
        assert res.status_code == 422
        body = res.json()
        assert body["error"] == "ValidationError"
        assert isinstance(body["detail"], list)

    def test_non_integer_id_is_422(self, client):
        assert client.get("/api/todos/abc").status_code == 422

    def test_store_failure_is_generic_500(self, client, engine):
        SQLModel.metadata.drop_all(engine)
        res = client.get("/api/todos")
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}
        assert "todos" not in res.text


class TestOutOfRangeIds:
    def test_huge_id_is_404_on_every_verb(self, client):
        huge = 2**64
        assert client.get(f"/api/todos/{huge}").status_code == 404
        assert client.put(f"/api/todos/{huge}", json={"title": "x"}).status_code == 404
        assert client.patch(f"/api/todos/{huge}", json={"title": "x"}).status_code == 404
        assert client.delete(f"/api/todos/{huge}").status_code == 404
        assert client.post(f"/api/todos/{huge}/tags", json={"tag": "x"}).status_code == 404

    def test_zero_and_negative_ids_are_404(self, client):
        assert client.get("/api/todos/0").status_code == 404
        assert client.delete("/api/todos/-1").status_code == 404
