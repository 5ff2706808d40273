"""
Instance Registry.

Read-only list of configured advisor apps with default-app resolution.
Built once from the settings file and never mutated afterwards.
"""

from dataclasses import dataclass

from advisor.core.config_schema import Selection
from advisor.core.exceptions import InstanceNotFound


@dataclass(frozen=True)
class NoAuth:
    """Send the request without an Authorization header."""


@dataclass(frozen=True)
class BearerAuth:
    """Send `Authorization: Bearer <token>`."""

    token: str

    def __repr__(self) -> str:
        return "BearerAuth(token=***)"


Authentication = NoAuth | BearerAuth

NO_AUTH = NoAuth()


@dataclass(frozen=True)
class Instance:
    """One named advisor service endpoint."""

    name: str
    location: str
    auth_token: str | None = None

    @property
    def authentication(self) -> Authentication:
        """Bearer if a non-empty token is configured, otherwise none."""
        if self.auth_token:
            return BearerAuth(self.auth_token)
        return NO_AUTH

    def url_for(self, path: str) -> str:
        return f"{self.location.rstrip('/')}{path}"


@dataclass(frozen=True)
class Registry:
    """
    Configured instances plus the optional default selection.

    Resolution is a pure function of the explicit name and this registry.
    """

    instances: tuple[Instance, ...] = ()
    default_name: str | None = None
    selection: Selection = Selection.AUTO

    def names(self) -> list[str]:
        return [instance.name for instance in self.instances]

    def get(self, name: str) -> Instance | None:
        for instance in self.instances:
            if instance.name == name:
                return instance
        return None

    def resolve(self, explicit_name: str | None = None) -> Instance:
        """
        Pick the instance to act upon.

        Args:
            explicit_name: Value of `--app`, if given. Takes precedence over
                the configured default.

        Returns:
            The resolved Instance.

        Raises:
            InstanceNotFound: If the name does not resolve, nothing is
                configured, or the choice is ambiguous under the policy.
        """
        if explicit_name is not None:
            instance = self.get(explicit_name)
            if instance is None:
                raise InstanceNotFound(f"unable to find app {explicit_name!r}")
            return instance

        if self.selection is Selection.EXPLICIT:
            raise InstanceNotFound("no app selected; pass --app <name>")

        if self.default_name is not None:
            instance = self.get(self.default_name)
            if instance is None:
                raise InstanceNotFound(f"default app {self.default_name!r} is not configured")
            return instance

        if not self.instances:
            raise InstanceNotFound("no apps configured")

        if self.selection is Selection.AUTO and len(self.instances) == 1:
            return self.instances[0]

        raise InstanceNotFound(
            f"no app selected and no default configured; choose one of: {', '.join(self.names())}"
        )
