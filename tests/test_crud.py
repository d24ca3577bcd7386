import pytest
from sqlalchemy.exc import IntegrityError, NoSuchColumnError, NoSuchTableError


def as_tuples(rows):
    return [(row.name, row.age, row.department) for row in rows]


class TestCRUD:
    def test_insert_returns_assigned_id(self, runner):
        assert runner.insert("Alice", 30, "HR") == 1
        assert runner.insert("Bob", 25, "Engineering") == 2

        ids = [row.id for row in runner.select(order_by="id")]
        assert ids == [1, 2]

    def test_select_contains_inserted_rows(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "Engineering")
        runner.insert("Carol")

        rows = as_tuples(runner.select())
        assert len(rows) == 3
        assert ("Alice", 30, "HR") in rows
        assert ("Bob", 25, "Engineering") in rows
        assert ("Carol", None, None) in rows

    def test_insert_without_name(self, runner):
        runner.insert("Alice", 30, "HR")

        with pytest.raises(IntegrityError):
            runner.insert(None, 25, "Engineering")

        assert as_tuples(runner.select()) == [("Alice", 30, "HR")]
        assert not runner.pending_changes.dirty

    def test_select_result_is_read_once(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "Engineering")

        result = runner.select()
        assert len(list(result)) == 2
        assert list(result) == []

    def test_select_filter(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "Engineering")
        runner.insert("Carol", 30, None)

        assert as_tuples(runner.select({"name": "Bob"})) == [("Bob", 25, "Engineering")]
        assert {row.name for row in runner.select({"age": 30})} == {"Alice", "Carol"}
        assert as_tuples(runner.select({"age": 30, "department": "HR"})) == [("Alice", 30, "HR")]
        assert as_tuples(runner.select({"department": None})) == [("Carol", 30, None)]
        assert runner.select({"name": "Nobody"}).all() == []

    def test_select_order_by(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "Engineering")
        runner.insert("Carol", 41, "HR")

        assert [row.name for row in runner.select(order_by="age")] == ["Bob", "Alice", "Carol"]
        assert [row.name for row in runner.select(order_by="-age")] == ["Carol", "Alice", "Bob"]
        assert [row.name for row in runner.select(order_by=["department", "-name"])] == ["Bob", "Carol", "Alice"]

    def test_unknown_column(self, runner):
        runner.insert("Alice", 30, "HR")

        with pytest.raises(NoSuchColumnError):
            runner.select({"salary": 100})

        with pytest.raises(NoSuchColumnError):
            runner.update({"name": "Alice"}, {"salary": 100})

        with pytest.raises(NoSuchColumnError):
            runner.delete({"salary": 100})

        with pytest.raises(NoSuchColumnError):
            runner.insert("Bob", salary=100)

        assert as_tuples(runner.select()) == [("Alice", 30, "HR")]

    def test_unknown_table(self, runner):
        with pytest.raises(NoSuchTableError):
            runner.select(table="payroll")

    def test_update(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "Engineering")

        assert runner.update({"name": "Alice"}, {"age": 31}) == 1
        assert as_tuples(runner.select({"name": "Alice"})) == [("Alice", 31, "HR")]

        # Same update again, same result
        assert runner.update({"name": "Alice"}, {"age": 31}) == 1
        assert as_tuples(runner.select({"name": "Alice"})) == [("Alice", 31, "HR")]

        # Untouched
        assert as_tuples(runner.select({"name": "Bob"})) == [("Bob", 25, "Engineering")]

    def test_update_without_match(self, runner):
        runner.insert("Alice", 30, "HR")

        assert runner.update({"name": "Nobody"}, {"age": 99}) == 0
        assert as_tuples(runner.select()) == [("Alice", 30, "HR")]

    def test_update_several_rows(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "HR")
        runner.insert("Carol", 41, "Engineering")

        assert runner.update({"department": "HR"}, {"department": "People"}) == 2
        assert {row.name for row in runner.select({"department": "People"})} == {"Alice", "Bob"}

    def test_update_keeps_id(self, runner):
        alice_id = runner.insert("Alice", 30, "HR")
        runner.update({"name": "Alice"}, {"name": "Alicia"})

        row = runner.select({"id": alice_id}).one()
        assert row.name == "Alicia"

    def test_delete(self, runner):
        runner.insert("Alice", 30, "HR")
        runner.insert("Bob", 25, "Engineering")

        assert runner.delete({"name": "Bob"}) == 1
        assert runner.select({"name": "Bob"}).all() == []
        assert as_tuples(runner.select()) == [("Alice", 30, "HR")]

    def test_delete_without_match(self, runner):
        runner.insert("Alice", 30, "HR")

        assert runner.delete({"name": "Nobody"}) == 0
        assert len(runner.select().all()) == 1

    def test_values_are_not_interpolated(self, runner):
        name = "Robert'); DROP TABLE employees; --"
        runner.insert(name, 12, "School")

        assert runner.table_names() == ["employees"]
        assert runner.select({"name": name}).one().department == "School"
