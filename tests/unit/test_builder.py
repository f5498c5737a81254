# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from bof_http import Http, MockTransport, MultipleProxies, TransportError
from bof_http.http.models import HttpRequest

FORM_VECTOR = {"foo": "bar", "baz": ["hi", "there!"]}
FORM_ENCODED = "foo=bar&baz%5B0%5D=hi&baz%5B1%5D=there%21"


def echo(wire: httpx.Request, request: HttpRequest) -> httpx.Response:  # noqa: ARG001
    return httpx.Response(200, headers={"X-Encoding": wire.headers.get("Content-Type", "")}, content=wire.content)


class Capture:
    """Queue entry recording what the builder sent."""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.wire: httpx.Request | None = None
        self.request: HttpRequest | None = None

    def __call__(self, wire: httpx.Request, request: HttpRequest) -> httpx.Response:
        self.wire = wire
        self.request = request
        return httpx.Response(self.status_code)


def test_get():
    http = Http.mock([httpx.Response(200, headers={"X-Foo": "Bar"}, text="OK!")])
    response = http.get("https://example.com")
    assert response.status_code == 200
    assert response.body_as_string() == "OK!"
    assert response.header_line("X-Foo") == "Bar"


def test_delete():
    capture = Capture()
    response = Http.mock([capture]).delete("https://example.com/items/1")
    assert response.status_code == 200
    assert capture.wire.method == "DELETE"
    assert capture.request.body is None
    assert capture.wire.content == b""


def test_defaults():
    capture = Capture()
    Http.mock([capture]).get("https://example.com")
    assert capture.request.timeout == 5.0
    assert capture.request.connect_timeout == 3.0
    assert capture.request.proxy is None
    assert capture.request.query is None


@pytest.mark.parametrize(
    "send, method",
    [
        (Http.post_json, "POST"),
        (Http.put_json, "PUT"),
        (Http.patch_json, "PATCH"),
    ],
)
def test_send_json(send, method):
    http = Http.mock([echo])
    response = send(http, "https://example.com", {"foo": "bar"})
    assert response.status_code == 200
    assert response.body_as_string() == '{"foo":"bar"}'
    assert response.header_line("X-Encoding") == "application/json"
    assert response.data() == {"foo": "bar"}
    assert http.transport.last_request.method == method


@pytest.mark.parametrize(
    "send, method",
    [
        (Http.post_form, "POST"),
        (Http.put_form, "PUT"),
    ],
)
def test_send_form(send, method):
    http = Http.mock([echo])
    response = send(http, "https://example.com", FORM_VECTOR)
    assert response.status_code == 200
    assert response.body_as_string() == FORM_ENCODED
    assert response.header_line("X-Encoding") == "application/x-www-form-urlencoded"
    assert http.transport.last_request.method == method


def test_explicit_content_type_wins():
    http = Http.mock([echo]).with_header("Content-Type", "application/vnd.api+json")
    response = http.post_json("https://example.com", {"foo": "bar"})
    assert response.header_line("X-Encoding") == "application/vnd.api+json"


def test_with_header():
    capture = Capture()
    http1 = Http.mock([capture])
    http2 = http1.with_header("X-Foo", ["Bar", "Baz"])
    assert http2 is not http1
    assert http1.headers == {}
    http2.get("https://example.com")
    assert capture.wire.headers.get_list("X-Foo") == ["Bar", "Baz"]


def test_with_header_replaces_any_casing():
    http = Http.mock([]).with_header("x-token", "old").with_header("X-Token", "new")
    assert http.headers == {"X-Token": "new"}


def test_with_header_copies_value_sequence():
    values = ["Bar"]
    http = Http.mock([]).with_header("X-Foo", values)
    values.append("Baz")
    assert http.headers["X-Foo"] == ("Bar",)


def test_with_timeout():
    capture = Capture()
    http1 = Http.mock([capture])
    http2 = http1.with_timeout(1, 2)
    assert http2 is not http1
    assert (http1.request_timeout, http1.connect_timeout) == (5.0, 3.0)
    http2.get("https://example.com")
    assert capture.request.timeout == 1.0
    assert capture.request.connect_timeout == 2.0
    assert capture.request.options()["timeout"] == 1.0
    assert capture.request.options()["connect_timeout"] == 2.0
    assert capture.wire.extensions["timeout"] == {"connect": 2.0, "read": 1.0, "write": 1.0, "pool": 1.0}


def test_zero_timeout_waits_indefinitely():
    capture = Capture()
    Http.mock([capture]).with_timeout(0, 0).get("https://example.com")
    assert capture.wire.extensions["timeout"] == {"connect": None, "read": None, "write": None, "pool": None}


@pytest.mark.parametrize("params", [{"foo": "bar"}, "foo=bar"])
def test_with_query_params(params):
    capture = Capture()
    http1 = Http.mock([capture])
    http2 = http1.with_query_params(params)
    assert http2 is not http1
    assert http1.query_params is None
    http2.get("https://example.com")
    assert capture.wire.url.query == b"foo=bar"


def test_with_query_params_copies_mapping():
    params = {"foo": ["bar"]}
    http = Http.mock([]).with_query_params(params)
    params["foo"].append("baz")
    params["extra"] = "1"
    assert http.query_params == {"foo": ["bar"]}


def test_with_single_proxy():
    capture = Capture()
    http1 = Http.mock([capture])
    http2 = http1.with_single_proxy("tcp://localhost:8125")
    assert http2 is not http1
    assert http1.proxy is None
    http2.get("https://example.com")
    assert capture.request.options()["proxy"] == "tcp://localhost:8125"


def test_with_multiple_proxies():
    capture = Capture()
    http1 = Http.mock([capture])
    http2 = http1.with_multiple_proxies("tcp://localhost:8125", "tcp://localhost:9124", [".mit.edu", "foo.com"])
    assert http2 is not http1
    http2.get("https://example.com")
    assert capture.request.proxy == MultipleProxies("tcp://localhost:8125", "tcp://localhost:9124", (".mit.edu", "foo.com"))
    assert capture.request.options()["proxy"] == {
        "http": "tcp://localhost:8125",
        "https": "tcp://localhost:9124",
        "no": [".mit.edu", "foo.com"],
    }


def test_mutators_share_transport_but_not_configuration():
    base = Http.mock([])
    derived = base.with_header("A", "1").with_timeout(1, 1).with_single_proxy("http://p").with_query_params({"q": 1})
    assert derived.transport is base.transport
    assert base.headers == {}
    assert base.proxy is None
    assert base.query_params is None
    assert derived.headers is not base.headers


def test_builder_is_frozen():
    http = Http.mock([])
    with pytest.raises(AttributeError):
        http.request_timeout = 10  # type: ignore[misc]


def test_error_status_is_a_response():
    response = Http.mock([httpx.Response(503, text="down")]).get("https://example.com")
    assert response.status_code == 503
    assert response.is_success is False
    assert response.body_as_string() == "down"


def test_transport_error_propagates_unchanged():
    error = httpx.ConnectError("connection refused")
    http = Http.mock([error, httpx.Response(200)])
    with pytest.raises(TransportError) as excinfo:
        http.get("https://example.com")
    assert excinfo.value is error
    assert len(http.transport.requests) == 1
    assert len(http.transport) == 1


def test_timeout_error_propagates():
    http = Http.mock([httpx.ReadTimeout("too slow")])
    with pytest.raises(httpx.TimeoutException):
        http.get("https://example.com")


def test_close_closes_transport():
    closed = []

    class Transport:
        def request(self, request):  # noqa: ANN001,ARG002
            return httpx.Response(200)

        def close(self) -> None:
            closed.append(True)

    with Http(transport=Transport()) as http:
        http.get("https://example.com")
    assert closed == [True]


def test_derived_builders_do_not_share_containers():
    parent = Http.mock([]).with_header("A", "1").with_query_params({"q": ["1"]})
    child = parent.with_timeout(1, 2)

    assert child.headers is not parent.headers
    assert child.query_params is not parent.query_params
    with pytest.raises(TypeError):
        parent.headers["X-Leak"] = "yes"  # type: ignore[index]
    with pytest.raises(TypeError):
        parent.query_params["leak"] = "yes"  # type: ignore[index]

    parent.query_params["q"].append("2")
    assert child.query_params == {"q": ["1"]}
    assert child.headers == {"A": "1"}


def test_constructor_copies_caller_containers():
    headers = {"A": ["1"]}
    query = {"q": "1"}
    http = Http(transport=MockTransport(), headers=headers, query_params=query)

    headers["B"] = "2"
    headers["A"].append("3")
    query["leak"] = "yes"

    assert http.headers == {"A": ("1",)}
    assert http.query_params == {"q": "1"}


def test_string_query_params_are_kept_as_given():
    assert Http.mock([]).with_query_params("?foo=bar").query_params == "?foo=bar"
