from app.db.models.todos import Todo, TodoTag
from app.features.tags import TagAggregator


class CountingTagRepo:
    """Faux repository de tags : renvoie les lignes fournies et compte les requêtes."""

    parent_key = "todo_id"

    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def list_for_parents(self, parent_ids):
        self.calls.append(list(parent_ids))
        return self.rows


def make_todo(todo_id, title="t"):
    return Todo(id=todo_id, title=title, description="d")


class TestAttachTags:
    def test_empty_parents_issue_no_query(self):
        repo = CountingTagRepo([TodoTag(id=1, todo_id=1, tag="a")])
        assert TagAggregator(repo).attach_tags([]) == []
        assert repo.calls == []

    def test_matching_tags_attached_and_orphans_dropped(self):
        repo = CountingTagRepo([
            TodoTag(id=1, todo_id=1, tag="a"),
            TodoTag(id=2, todo_id=3, tag="x"),
        ])
        result = TagAggregator(repo).attach_tags([make_todo(1), make_todo(2)])

        assert [r["id"] for r in result] == [1, 2]
        assert [t["tag"] for t in result[0]["tags"]] == ["a"]
        assert result[1]["tags"] == []
        assert all(t["todo_id"] != 3 for r in result for t in r["tags"])

    def test_single_query_for_many_parents(self):
        repo = CountingTagRepo([])
        TagAggregator(repo).attach_tags([make_todo(i) for i in range(1, 51)])
        assert len(repo.calls) == 1
        assert repo.calls[0] == list(range(1, 51))

    def test_tag_order_follows_store(self):
        repo = CountingTagRepo([
            TodoTag(id=5, todo_id=1, tag="zeta"),
            TodoTag(id=2, todo_id=1, tag="alpha"),
        ])
        result = TagAggregator(repo).attach_tags([make_todo(1)])
        assert [t["tag"] for t in result[0]["tags"]] == ["zeta", "alpha"]

    def test_duplicate_parents_are_harmless(self):
        repo = CountingTagRepo([TodoTag(id=1, todo_id=1, tag="a")])
        result = TagAggregator(repo).attach_tags([make_todo(1), make_todo(1)])
        assert len(result) == 2
        assert all([t["tag"] for t in r["tags"]] == ["a"] for r in result)
        assert len(repo.calls) == 1

    def test_parent_fields_are_kept(self):
        repo = CountingTagRepo([])
        result = TagAggregator(repo).attach_tags([make_todo(7, title="Buy milk")])
        assert result[0]["title"] == "Buy milk"
        assert result[0]["completed"] is False
