"""Unit tests for the instance registry."""

import pytest

from advisor.core.config_schema import Selection
from advisor.core.exceptions import InstanceNotFound
from advisor.domain.registry import NO_AUTH, BearerAuth, Instance, Registry

STAGING = Instance(name="staging", location="http://staging.test", auth_token="tok")
PRODUCTION = Instance(name="production", location="http://production.test/")


class TestInstance:
    """Tests for Instance helpers."""

    def test_bearer_when_token_present(self) -> None:
        assert STAGING.authentication == BearerAuth("tok")

    def test_no_auth_without_token(self) -> None:
        assert PRODUCTION.authentication is NO_AUTH

    def test_no_auth_with_empty_token(self) -> None:
        instance = Instance(name="x", location="http://x", auth_token="")
        assert instance.authentication is NO_AUTH

    def test_url_for_joins_without_double_slash(self) -> None:
        assert PRODUCTION.url_for("/healthcheck") == "http://production.test/healthcheck"
        assert STAGING.url_for("/admin/people") == "http://staging.test/admin/people"

    def test_bearer_repr_hides_token(self) -> None:
        assert "tok" not in repr(BearerAuth("tok"))


class TestResolveExplicit:
    """An explicit name always takes precedence."""

    def test_explicit_name_wins_over_default(self) -> None:
        registry = Registry(instances=(STAGING, PRODUCTION), default_name="staging")
        assert registry.resolve("production") == PRODUCTION

    def test_unknown_explicit_name(self) -> None:
        registry = Registry(instances=(STAGING, PRODUCTION), default_name="staging")
        with pytest.raises(InstanceNotFound, match="unable to find app 'qa'"):
            registry.resolve("qa")

    @pytest.mark.parametrize("selection", list(Selection))
    def test_explicit_name_under_every_policy(self, selection: Selection) -> None:
        registry = Registry(instances=(STAGING,), selection=selection)
        assert registry.resolve("staging") == STAGING


class TestResolveDefault:
    """Falling back when --app is not given."""

    def test_configured_default(self) -> None:
        registry = Registry(instances=(STAGING, PRODUCTION), default_name="production")
        assert registry.resolve() == PRODUCTION

    def test_default_that_does_not_exist(self) -> None:
        registry = Registry(instances=(STAGING,), default_name="qa")
        with pytest.raises(InstanceNotFound, match="default app 'qa'"):
            registry.resolve()

    def test_ambiguous_without_default(self) -> None:
        registry = Registry(instances=(STAGING, PRODUCTION))
        with pytest.raises(InstanceNotFound, match="staging, production"):
            registry.resolve()

    def test_empty_registry(self) -> None:
        with pytest.raises(InstanceNotFound, match="no apps configured"):
            Registry().resolve()

    def test_single_instance_fallback_under_auto(self) -> None:
        registry = Registry(instances=(STAGING,))
        assert registry.resolve() == STAGING

    def test_no_single_instance_fallback_under_default(self) -> None:
        registry = Registry(instances=(STAGING,), selection=Selection.DEFAULT)
        with pytest.raises(InstanceNotFound):
            registry.resolve()

    def test_explicit_policy_ignores_default(self) -> None:
        registry = Registry(
            instances=(STAGING,),
            default_name="staging",
            selection=Selection.EXPLICIT,
        )
        with pytest.raises(InstanceNotFound, match="--app"):
            registry.resolve()
