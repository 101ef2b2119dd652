"""Unit tests for the curl_cffi backed HTTP client."""

from types import SimpleNamespace

import pytest
from curl_cffi import CurlError

from gitexpress.infrastructure.errors import HTTPClientError
from gitexpress.infrastructure.github_client import GitHubApiClient
from gitexpress.infrastructure.http_client import DEFAULT_USER_AGENT, AsyncHTTPClient


class FakeSession:
    """Stands in for ``curl_cffi.requests.AsyncSession``."""

    def __init__(self, status_code=200, text="{}", error=None):
        self.status_code = status_code
        self.text = text
        self.error = error
        self.calls = []

    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(status_code=self.status_code, text=self.text)


@pytest.fixture
def use_session(monkeypatch):
    def install(session: FakeSession) -> FakeSession:
        monkeypatch.setattr("gitexpress.infrastructure.http_client.AsyncSession", session)
        return session

    return install


@pytest.mark.asyncio
async def test_not_found_keeps_status_code(use_session):
    use_session(FakeSession(status_code=404, text="Not Found"))

    with pytest.raises(HTTPClientError) as exc_info:
        await AsyncHTTPClient().get_json("https://api.github.com/repos/me/nope")

    assert exc_info.value.status_code == 404
    assert exc_info.value.is_not_found
    assert exc_info.value.url == "https://api.github.com/repos/me/nope"


@pytest.mark.asyncio
async def test_server_error_is_not_not_found(use_session):
    use_session(FakeSession(status_code=503, text=""))

    with pytest.raises(HTTPClientError) as exc_info:
        await AsyncHTTPClient().get_text("https://codeforces.com/")

    assert exc_info.value.status_code == 503
    assert not exc_info.value.is_not_found


@pytest.mark.asyncio
async def test_non_json_body_raises(use_session):
    use_session(FakeSession(status_code=200, text="<html>maintenance</html>"))

    with pytest.raises(HTTPClientError) as exc_info:
        await AsyncHTTPClient().get_json("https://codeforces.com/api/problemset.problems")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_transport_error_is_wrapped(use_session):
    use_session(FakeSession(error=CurlError("Connection timed out")))

    with pytest.raises(HTTPClientError) as exc_info:
        await AsyncHTTPClient().get_text("https://leetcode.com/")

    assert isinstance(exc_info.value.__cause__, CurlError)
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_request_options(use_session):
    session = use_session(FakeSession(text='{"ok": true}'))
    client = AsyncHTTPClient(timeout=5.0, impersonate=None)

    data = await client.post_json(
        "https://example.com/api", {"a": 1}, headers={"Authorization": "Bearer x"}
    )

    assert data == {"ok": True}
    method, url, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["json"] == {"a": 1}
    assert kwargs["timeout"] == 5.0
    assert kwargs["impersonate"] is None
    assert kwargs["headers"] == {
        "User-Agent": DEFAULT_USER_AGENT,
        "Authorization": "Bearer x",
    }


@pytest.mark.asyncio
async def test_headers_override_default_user_agent(use_session):
    session = use_session(FakeSession(text="ok"))

    await AsyncHTTPClient().get_text("https://example.com", headers={"User-Agent": "gitexpress"})

    assert session.calls[0][2]["headers"]["User-Agent"] == "gitexpress"


@pytest.mark.asyncio
async def test_missing_repository_through_real_client(use_session):
    use_session(FakeSession(status_code=404, text='{"message": "Not Found"}'))

    repo = await GitHubApiClient("ghp_x", AsyncHTTPClient()).get_repository("me", "archive")

    assert repo is None
