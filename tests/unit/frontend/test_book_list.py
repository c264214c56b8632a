"""Book list view tests."""

import httpx
import pytest
from fastapi.testclient import TestClient
from loguru import logger

from src.bookshelf.api.http.app import app
from src.bookshelf.frontend import BookListView, create_api_client
from tests.utils import book_payload

BASE_URL = "http://books.test/api/"


@pytest.fixture
def error_logs():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="ERROR")
    yield messages
    logger.remove(handler_id)


def _client(handler) -> httpx.Client:
    return httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestBookListView:
    """Test mounting and rendering against a mocked API."""

    def test_mount_fetches_collection(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json=[
                    {"id": 1, "title": "Dune", "author": "Frank Herbert", "published_date": "1965-08-01"},
                    {"id": 2, "title": "Emma", "author": "Jane Austen", "published_date": "1815-12-23"},
                ],
            )

        view = BookListView(_client(handler))
        view.mount()

        assert [str(r.url) for r in requests] == [f"{BASE_URL}books/"]
        assert requests[0].method == "GET"
        assert view.lines() == ["Dune - Frank Herbert", "Emma - Jane Austen"]

    def test_mount_reads_only_once(self):
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json=[])

        view = BookListView(_client(handler))
        view.mount()
        view.mount()

        assert calls == 1
        assert view.mounted is True

    def test_empty_before_mount(self):
        view = BookListView(_client(lambda request: httpx.Response(200, json=[])))

        assert view.mounted is False
        assert view.lines() == []

    def test_connection_error_is_logged_not_raised(self, error_logs):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        view = BookListView(_client(handler))
        view.mount()

        assert view.lines() == []
        assert any("Failed to load books" in message for message in error_logs)

    def test_server_error_is_logged(self, error_logs):
        view = BookListView(_client(lambda request: httpx.Response(500)))
        view.mount()

        assert view.books == []
        assert error_logs

    def test_malformed_payload_is_logged(self, error_logs):
        view = BookListView(
            _client(lambda request: httpx.Response(200, json=[{"title": "No author"}]))
        )
        view.mount()

        assert view.books == []
        assert error_logs

    def test_render_html_escapes_markup(self):
        view = BookListView(
            _client(
                lambda request: httpx.Response(
                    200,
                    json=[{"id": 7, "title": "<b>Bold</b>", "author": "A & B", "published_date": "2020-01-01"}],
                )
            )
        )
        view.mount()

        html = view.render_html()

        assert "<h1>📚 Book List</h1>" in html
        assert '<li data-id="7">&lt;b&gt;Bold&lt;/b&gt; - A &amp; B</li>' in html


def test_create_api_client_uses_given_base_url():
    with create_api_client("http://example.test/api/", timeout=2) as client:
        assert str(client.base_url) == "http://example.test/api/"
        assert client.headers["Accept"] == "application/json"
        assert client.timeout.read == 2


def test_view_against_running_application():
    """The view reads the real collection endpoint."""
    with TestClient(app, base_url="http://testserver/api/") as api_client:
        api_client.post("books/", json=book_payload())
        api_client.post("books/", json=book_payload(title="Linear Algebra", author="Strang"))

        view = BookListView(api_client)
        view.mount()

    assert sorted(view.lines()) == ["Discreet Math - Rajesh", "Linear Algebra - Strang"]
