"""Unit tests for response rendering."""

import io

import pytest
from rich.console import Console

from advisor.cli.render import Person, parse_people, people_table, render_people
from advisor.core.exceptions import MalformedResponse


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=120, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestParsePeople:
    """Tests for parse_people."""

    def test_parses_array(self) -> None:
        people = parse_people('[{"name":"A","email":"a@x.com","is_mentor":true}]')
        assert people == [Person(name="A", email="a@x.com", is_mentor=True)]

    def test_ignores_extra_fields(self) -> None:
        people = parse_people('[{"name":"A","email":"a@x.com","is_mentor":false,"id":7}]')
        assert people[0].is_mentor is False

    def test_empty_array(self) -> None:
        assert parse_people("[]") == []

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            '{"name":"A"}',
            '[{"name":"A","email":"a@x.com"}]',
            "",
        ],
    )
    def test_malformed(self, payload: str) -> None:
        with pytest.raises(MalformedResponse, match="Could not read people"):
            parse_people(payload)


class TestPeopleTable:
    """Tests for the people table."""

    def test_columns(self) -> None:
        table = people_table([])
        assert [column.header for column in table.columns] == ["Name", "Email", "Is mentor"]

    def test_row_contents(self) -> None:
        output = _render(render_people('[{"name":"A","email":"a@x.com","is_mentor":true}]'))
        rows = [line for line in output.splitlines() if "a@x.com" in line]
        assert len(rows) == 1
        cells = [cell.strip() for cell in rows[0].strip("│┃| ").split("│")]
        assert cells == ["A", "a@x.com", "true"]

    def test_markup_in_names_is_literal(self) -> None:
        output = _render(people_table([Person(name="[bold]B[/bold]", email="b@x.com", is_mentor=False)]))
        assert "[bold]B[/bold]" in output
        assert "false" in output
