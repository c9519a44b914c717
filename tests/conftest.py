"""Shared fixtures: session credentials and a fake Voyager backend."""

import json
from typing import Any, Callable, List, Optional, Tuple

import httpx
import pytest

from voyager import Client, Credentials
from voyager.endpoints import BASE_URL

API_PREFIX = httpx.URL(BASE_URL).raw_path.decode()

LI_AT = "AQE-test-li-at-token"
JSESSIONID = "ajax:1234567890123456789"


class FakeVoyager:
    """Routes requests to canned JSON responses and records every request."""

    def __init__(self):
        self.routes: List[Tuple[str, str, int, Any]] = []
        self.requests: List[httpx.Request] = []
        self.error: Optional[Callable[[httpx.Request], Exception]] = None

    def add(self, path: str, payload: Any = None, status: int = 200, method: str = "GET") -> None:
        self.routes.append((method, path, status, payload))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)

        path = request.url.raw_path.decode()
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]
        for method, route, status, payload in self.routes:
            if method == request.method and route == path:
                return httpx.Response(status, json=payload if payload is not None else {})
        return httpx.Response(404, json={"message": f"no route for {request.method} {path}"})

    def client(self, credentials: Credentials) -> Client:
        return Client(credentials, transport=httpx.MockTransport(self.handler))

    @property
    def paths(self) -> List[str]:
        out = []
        for request in self.requests:
            path = request.url.raw_path.decode()
            out.append(path[len(API_PREFIX):] if path.startswith(API_PREFIX) else path)
        return out

    def body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials.from_cookies(LI_AT, f'"{JSESSIONID}"', source="env")


@pytest.fixture
def voyager() -> FakeVoyager:
    return FakeVoyager()


@pytest.fixture
def client(voyager: FakeVoyager, credentials: Credentials) -> Client:
    return voyager.client(credentials)


# ---- Payload builders ----

def mini_profile(
    username: str = "peggyrayzis",
    first: str = "Peggy",
    last: str = "Rayzis",
    occupation: str = "Developer marketing",
    urn: str = "urn:li:fs_miniProfile:ACoAAA1",
) -> dict:
    return {
        "$type": "com.linkedin.voyager.identity.shared.MiniProfile",
        "entityUrn": urn,
        "objectUrn": "urn:li:member:12345",
        "firstName": first,
        "lastName": last,
        "occupation": occupation,
        "publicIdentifier": username,
    }


def me_legacy() -> dict:
    return {"plainId": 12345, "miniProfile": mini_profile()}


def me_normalized() -> dict:
    return {
        "data": {"plainId": 12345, "*miniProfile": "urn:li:fs_miniProfile:ACoAAA1"},
        "included": [mini_profile()],
    }
