"""Tests for Voyager request headers."""

import json

from voyager import Credentials, build_headers
from voyager.headers import LI_TRACK, USER_AGENT


class TestBuildHeaders:
    def test_cookie_and_csrf_from_credentials(self, credentials):
        headers = build_headers(credentials)
        assert headers["Cookie"] == credentials.cookie_header
        assert headers["csrf-token"] == credentials.csrf_token

    def test_browser_user_agent(self, credentials):
        ua = build_headers(credentials)["User-Agent"]
        assert ua == USER_AGENT
        assert "Mozilla/5.0" in ua
        assert "Chrome" in ua
        assert "Safari" in ua

    def test_protocol_headers(self, credentials):
        headers = build_headers(credentials)
        assert headers["X-Restli-Protocol-Version"] == "2.0.0"
        assert headers["Accept"] == "application/vnd.linkedin.normalized+json+2.1"
        assert headers["X-Li-Lang"] == "en_US"
        assert "en" in headers["Accept-Language"]

    def test_tracking_blob_is_fixed(self, credentials):
        track = json.loads(build_headers(credentials)["X-Li-Track"])
        assert track["timezone"] == "America/Los_Angeles"
        assert track["timezoneOffset"] == -8
        assert track["deviceFormFactor"] == "DESKTOP"
        assert track["clientVersion"] == track["mpVersion"]

    def test_deterministic(self, credentials):
        assert build_headers(credentials) == build_headers(credentials)

    def test_only_session_fields_vary(self, credentials):
        other = Credentials.from_cookies("different-li-at", "different-jsession", source="cli")
        a, b = build_headers(credentials), build_headers(other)
        differing = {k for k in a if a[k] != b[k]}
        assert differing == {"Cookie", "csrf-token"}
        assert b["Cookie"] == 'li_at=different-li-at; JSESSIONID="different-jsession"'
        assert b["csrf-token"] == "different-jsession"
        assert a["X-Li-Track"] == b["X-Li-Track"] == LI_TRACK

    def test_source_does_not_affect_headers(self):
        env = Credentials.from_cookies("tok", "ajax:1", source="env")
        cli = Credentials.from_cookies("tok", "ajax:1", source="cli")
        assert build_headers(env) == build_headers(cli)
