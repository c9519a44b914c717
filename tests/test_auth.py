"""Tests for session credential construction and resolution."""

import pytest
from pydantic import ValidationError

from voyager import CredentialsError, Credentials, resolve_credentials
from voyager.auth import build_cookie_header, strip_quotes


class TestCredentials:
    def test_from_cookies(self):
        creds = Credentials.from_cookies("AQE-token", '"ajax:123"', source="env")
        assert creds.li_at == "AQE-token"
        assert creds.jsessionid == "ajax:123"
        assert creds.csrf_token == "ajax:123"
        assert creds.cookie_header == 'li_at=AQE-token; JSESSIONID="ajax:123"'
        assert creds.source == "env"

    def test_immutable(self, credentials):
        with pytest.raises(ValidationError):
            credentials.li_at = "other"

    def test_repr_hides_secrets(self, credentials):
        assert credentials.li_at not in repr(credentials)
        assert credentials.li_at not in str(credentials)

    def test_strip_quotes(self):
        assert strip_quotes('"ajax:1"') == "ajax:1"
        assert strip_quotes("ajax:1") == "ajax:1"
        assert strip_quotes('"') == '"'

    def test_cookie_header(self):
        assert build_cookie_header("a", "b") == 'li_at=a; JSESSIONID="b"'


class TestResolveCredentials:
    def test_cli_values(self):
        creds = resolve_credentials("tok", "ajax:1", env={})
        assert creds.source == "cli"
        assert creds.csrf_token == "ajax:1"

    def test_env_values(self):
        creds = resolve_credentials(
            env={"LINKEDIN_LI_AT": "tok", "LINKEDIN_JSESSIONID": '"ajax:2"'},
        )
        assert creds.source == "env"
        assert creds.jsessionid == "ajax:2"

    def test_cli_wins_over_env(self):
        creds = resolve_credentials(
            "cli-tok", "ajax:cli",
            env={"LINKEDIN_LI_AT": "env-tok", "LINKEDIN_JSESSIONID": "ajax:env"},
        )
        assert creds.li_at == "cli-tok"
        assert creds.jsessionid == "ajax:cli"
        assert creds.source == "cli"

    def test_mixed_sources(self):
        creds = resolve_credentials("cli-tok", env={"LINKEDIN_JSESSIONID": "ajax:env"})
        assert creds.li_at == "cli-tok"
        assert creds.jsessionid == "ajax:env"
        assert creds.source == "cli+env"

    @pytest.mark.parametrize("env", [{}, {"LINKEDIN_LI_AT": "tok"}, {"LINKEDIN_JSESSIONID": "x"}])
    def test_missing_raises(self, env):
        with pytest.raises(CredentialsError, match="LINKEDIN_LI_AT"):
            resolve_credentials(env=env)
