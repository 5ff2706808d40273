"""
Command Model and Parser.

The closed set of operations the client can request, and the mapping from
tokenized command-line input to one of them. Parsing never raises for bad
user input: anything that does not match falls through to `Unrecognized`.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from advisor.core.exceptions import TokenizerContractError

EMAIL_SIGIL = "@"
EMAIL_ERROR = "The value did not contain the required @ sigil"

SHOW_KINDS = ("people", "questionnaires")
UPDATE_MODES = ("add", "remove")


def has_at(value: str) -> bool:
    """True iff the value contains at least one `@`."""
    return EMAIL_SIGIL in value


@dataclass(frozen=True)
class Command:
    """Base of all command variants."""

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Healthcheck(Command):
    pass


@dataclass(frozen=True)
class ShowPeople(Command):
    pass


@dataclass(frozen=True)
class ShowQuestionnaires(Command):
    pass


@dataclass(frozen=True)
class DeletePerson(Command):
    email: str


@dataclass(frozen=True)
class CreatePerson(Command):
    """Person attributes, stored as a read-only mapping."""

    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash((type(self), frozenset(self.fields.items())))


@dataclass(frozen=True)
class AddPersonToQuestionnaire(Command):
    questionnaire_id: str
    email: str


@dataclass(frozen=True)
class RemovePersonFromQuestionnaire(Command):
    questionnaire_id: str
    email: str


@dataclass(frozen=True)
class Unrecognized(Command):
    """Input that matched no command. A valid parse result, not an error."""

    raw_tokens: tuple[str, ...] = ()


COMMAND_TYPES: tuple[type[Command], ...] = (
    Healthcheck,
    ShowPeople,
    ShowQuestionnaires,
    DeletePerson,
    CreatePerson,
    AddPersonToQuestionnaire,
    RemovePersonFromQuestionnaire,
    Unrecognized,
)


def _parse_health(args: Sequence[str]) -> Command | None:
    if args:
        return None
    return Healthcheck()


def _parse_show(args: Sequence[str]) -> Command | None:
    if len(args) != 1:
        return None
    kind = args[0]
    if kind == "people":
        return ShowPeople()
    if kind == "questionnaires":
        return ShowQuestionnaires()
    raise TokenizerContractError(
        f"'kind' must be one of {', '.join(SHOW_KINDS)}, got {kind!r}"
    )


def _parse_delete(args: Sequence[str]) -> Command | None:
    if len(args) != 1 or not has_at(args[0]):
        return None
    return DeletePerson(email=args[0])


def _parse_update(args: Sequence[str]) -> Command | None:
    if len(args) != 3:
        return None
    questionnaire_id, mode, email = args
    if not has_at(email):
        return None
    if mode == "add":
        return AddPersonToQuestionnaire(questionnaire_id=questionnaire_id, email=email)
    if mode == "remove":
        return RemovePersonFromQuestionnaire(questionnaire_id=questionnaire_id, email=email)
    raise TokenizerContractError(
        f"'mode' must be one of {', '.join(UPDATE_MODES)}, got {mode!r}"
    )


def _parse_person_fields(tokens: Sequence[str]) -> dict[str, str] | None:
    """Collect `--key value` / `--key=value` tokens. Later keys win."""
    fields: dict[str, str] = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.startswith("--") or len(token) == 2:
            return None
        key = token[2:]
        if "=" in key:
            key, value = key.split("=", 1)
            i += 1
        else:
            if i + 1 >= len(tokens):
                return None
            value = tokens[i + 1]
            i += 2
        if not key:
            return None
        fields[key] = value
    return fields


def _parse_create(args: Sequence[str]) -> Command | None:
    if not args or args[0] != "person":
        return None
    fields = _parse_person_fields(args[1:])
    if fields is None:
        return None
    return CreatePerson(fields=fields)


_PARSERS = (
    ("health", _parse_health),
    ("show", _parse_show),
    ("delete", _parse_delete),
    ("update", _parse_update),
    ("create", _parse_create),
)


def parse_command(subcommand: str, args: Sequence[str] = ()) -> Command:
    """
    Map a subcommand name and its tokens to a Command.

    Args:
        subcommand: Subcommand name as given on the command line.
        args: Positional values and flag tokens following it.

    Returns:
        The matching Command, or Unrecognized carrying the raw tokens.

    Raises:
        TokenizerContractError: If an enumerated value slipped past the
            tokenizer's constraint.
    """
    for name, parser in _PARSERS:
        if subcommand == name:
            command = parser(args)
            if command is not None:
                return command
            break
    return Unrecognized(raw_tokens=(subcommand, *args))
