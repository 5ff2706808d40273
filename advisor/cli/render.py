"""
Response Rendering.

Turns successful payloads into terminal output.
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from rich.markup import escape
from rich.table import Table

from advisor.core.exceptions import MalformedResponse


class Person(BaseModel):
    """One entry of the people listing."""

    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    is_mentor: bool


_people_adapter = TypeAdapter(list[Person])


def parse_people(payload: str) -> list[Person]:
    """
    Parse the JSON array returned by the people listing.

    Raises:
        MalformedResponse: If the payload is not a JSON array of people.
    """
    try:
        return _people_adapter.validate_json(payload)
    except ValidationError as e:
        raise MalformedResponse(
            f"Could not read people from response: {e.error_count()} error(s), "
            f"first: {e.errors()[0]['msg']}"
        ) from e


def people_table(people: list[Person]) -> Table:
    table = Table(title="People", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Email")
    table.add_column("Is mentor")

    for person in people:
        table.add_row(escape(person.name), escape(person.email), "true" if person.is_mentor else "false")

    return table


def render_people(payload: str) -> Table:
    return people_table(parse_people(payload))
