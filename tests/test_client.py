"""Tests for the Voyager HTTP client (no real network)."""

import httpx
import pytest

from voyager import Client, LinkedInRequestError
from voyager.headers import USER_AGENT


class TestRequest:
    async def test_builds_url_and_headers(self, voyager, client, credentials):
        voyager.add("/me", {"ok": True})

        res = await client.request("/me")

        assert res.status_code == 200
        request = voyager.requests[0]
        assert str(request.url) == "https://www.linkedin.com/voyager/api/me"
        assert request.method == "GET"
        assert request.headers["cookie"] == credentials.cookie_header
        assert request.headers["csrf-token"] == credentials.csrf_token
        assert request.headers["user-agent"] == USER_AGENT
        assert request.headers["x-restli-protocol-version"] == "2.0.0"

    async def test_extra_headers_merge_over_built(self, voyager, client, credentials):
        voyager.add("/me")

        await client.request("/me", headers={"X-Li-Lang": "de_DE", "X-Extra": "1"})

        request = voyager.requests[0]
        assert request.headers["x-li-lang"] == "de_DE"
        assert request.headers["x-extra"] == "1"
        assert request.headers["cookie"] == credentials.cookie_header

    async def test_post_json(self, voyager, client):
        voyager.add("/growth/normInvitations", {}, status=201, method="POST")

        await client.post_json("/growth/normInvitations", {"recipientProfileUrn": "urn:li:fsd_profile:X"})

        request = voyager.requests[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/json"
        assert voyager.body(0) == {"recipientProfileUrn": "urn:li:fsd_profile:X"}

    async def test_request_json(self, voyager, client):
        voyager.add("/me", {"miniProfile": {"publicIdentifier": "x"}})
        assert await client.request_json("/me") == {"miniProfile": {"publicIdentifier": "x"}}


class TestErrors:
    @pytest.mark.parametrize("status", [400, 401, 403, 404, 429, 500, 999])
    async def test_non_success_raises_with_status_and_path(self, voyager, client, status):
        voyager.add("/identity/profiles/x/profileView", {}, status=status)

        with pytest.raises(LinkedInRequestError) as exc:
            await client.request("/identity/profiles/x/profileView")

        assert exc.value.status_code == status
        assert exc.value.path == "/identity/profiles/x/profileView"

    async def test_403_is_not_retried(self, voyager, client):
        voyager.add("/me", {}, status=403)

        with pytest.raises(LinkedInRequestError) as exc:
            await client.request("/me")

        assert exc.value.status_code == 403
        assert "Not authorized" in str(exc.value)
        assert len(voyager.requests) == 1

    async def test_429_is_not_retried(self, voyager, client):
        voyager.add("/me", {}, status=429)

        with pytest.raises(LinkedInRequestError):
            await client.request("/me")

        assert len(voyager.requests) == 1

    async def test_error_body_message_included(self, voyager, client):
        voyager.add("/relationships/invitations/INV1", {"message": "Invitation expired"},
                    status=400, method="PUT")

        with pytest.raises(LinkedInRequestError) as exc:
            await client.request("/relationships/invitations/INV1", method="PUT")

        assert exc.value.details == "Invitation expired"
        assert "Invitation expired" in str(exc.value)

    async def test_non_json_error_body(self, credentials):
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="<html>bad gateway"))
        client = Client(credentials, transport=transport)

        with pytest.raises(LinkedInRequestError) as exc:
            await client.request("/me")

        assert exc.value.status_code == 502
        assert exc.value.details is None

    async def test_transport_error_propagates_unchanged(self, voyager, client):
        voyager.error = lambda request: httpx.ConnectError("connection reset", request=request)

        with pytest.raises(httpx.ConnectError, match="connection reset"):
            await client.request("/me")

        assert len(voyager.requests) == 1


class TestValidateSession:
    async def test_valid(self, voyager, client):
        voyager.add("/me", {"miniProfile": {}})
        assert await client.validate_session() is True
        assert voyager.paths == ["/me"]

    async def test_expired(self, voyager, client):
        voyager.add("/me", {}, status=401)
        assert await client.validate_session() is False

    async def test_network_failure(self, voyager, client):
        voyager.error = lambda request: httpx.ConnectError("dns failure", request=request)
        assert await client.validate_session() is False
