"""Unit tests for the HTTP transport (no network required)."""

from unittest.mock import Mock

import pytest
import requests

from tlon_expose.models import ShipConfig
from tlon_expose.transport import Transport, UrbitClient, UrbitHttpError, is_not_found


def make_response(status_code=200, reason="OK", payload=None):
    return Mock(
        ok=200 <= status_code < 400,
        status_code=status_code,
        reason=reason,
        json=Mock(return_value=payload),
    )


@pytest.fixture
def session():
    mock = Mock(spec=requests.Session)
    mock.get.return_value = make_response(payload=True)
    mock.put.return_value = make_response(204, "No Content")
    mock.post.return_value = make_response(204, "No Content")
    return mock


def make_client(session, code=None):
    config = ShipConfig(url="http://localhost:8080/", ship="~zod", code=code, timeout=5)
    return UrbitClient(config, session=session)


def test_satisfies_transport_protocol(session):
    assert isinstance(make_client(session), Transport)


def test_scry_builds_url(session):
    session.get.return_value = make_response(payload=["/1/chan/chat/~zod/ch/msg/1"])
    client = make_client(session)

    result = client.scry("expose", "/show")

    assert result == ["/1/chan/chat/~zod/ch/msg/1"]
    session.get.assert_called_once_with(
        "http://localhost:8080/~/scry/expose/show.json", timeout=5
    )


def test_scry_not_found_raises_404(session):
    session.get.return_value = make_response(404, "Not Found")
    client = make_client(session)

    with pytest.raises(UrbitHttpError) as exc_info:
        client.scry("expose", "/show/1/chan/chat/~zod/ch/msg/1")

    err = exc_info.value
    assert err.status_code == 404
    assert "HTTP 404: Not Found" in str(err)
    assert is_not_found(err)


def test_poke_puts_channel_action(session):
    client = make_client(session)

    client.poke("expose", "json", {"show": "/1/chan/chat/~zod/ch/msg/1"})
    client.poke("expose", "noun", {"eager": True})

    assert session.put.call_count == 2
    first, second = session.put.call_args_list

    url = first.args[0]
    assert url == f"http://localhost:8080/~/channel/{client.channel_id}"
    assert first.kwargs["json"] == [
        {
            "id": 1,
            "action": "poke",
            "ship": "zod",
            "app": "expose",
            "mark": "json",
            "json": {"show": "/1/chan/chat/~zod/ch/msg/1"},
        }
    ]
    assert second.kwargs["json"][0]["id"] == 2
    assert second.kwargs["json"][0]["mark"] == "noun"


def test_poke_failure_raises(session):
    session.put.return_value = make_response(500, "Internal Server Error")
    client = make_client(session)

    with pytest.raises(UrbitHttpError, match="HTTP 500"):
        client.poke("expose", "json", {"hide": "/1/chan/chat/~zod/ch/msg/1"})


def test_login_before_first_request(session):
    client = make_client(session, code="lidlut-tabwed")

    client.scry("expose", "/show")
    client.scry("expose", "/show")

    session.post.assert_called_once_with(
        "http://localhost:8080/~/login",
        data={"password": "lidlut-tabwed"},
        timeout=5,
    )


def test_no_login_without_code(session):
    client = make_client(session)
    client.scry("expose", "/show")
    session.post.assert_not_called()


def test_login_failure(session):
    session.post.return_value = make_response(401, "Unauthorized")
    client = make_client(session, code="wrong")

    with pytest.raises(UrbitHttpError, match="401"):
        client.scry("expose", "/show")
    session.get.assert_not_called()


def test_login_requires_code(session):
    with pytest.raises(ValueError, match="No access code"):
        make_client(session).login()


def test_connection_error_propagates(session):
    session.get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(requests.ConnectionError):
        make_client(session).scry("expose", "/show")


def test_current_user_id(session):
    assert make_client(session).current_user_id == "~zod"


def test_context_manager_closes_session(session):
    with make_client(session) as client:
        assert client.session is session
    session.close.assert_called_once()


class TestIsNotFound:
    def test_status_code(self):
        assert is_not_found(UrbitHttpError(404, "Not Found", "/"))
        assert not is_not_found(UrbitHttpError(500, "Server Error", "/"))

    def test_status_code_wins_over_message(self):
        assert not is_not_found(UrbitHttpError(500, "not found upstream", "/"))

    def test_message(self):
        assert is_not_found(RuntimeError("scry failed with 404"))
        assert is_not_found(RuntimeError("Path Not Found"))
        assert not is_not_found(RuntimeError("timeout"))


def test_requests_logged_with_arguments(session, caplog):
    client = make_client(session)
    with caplog.at_level("DEBUG", logger="tlon_expose.transport.http"):
        client.scry("expose", "/show")
        client.poke("expose", "json", {"show": "/1/chan/chat/~zod/ch/msg/1"})

    scry_record, poke_record = caplog.records[-2:]
    assert scry_record.msg == "scry %s%s"
    assert scry_record.args == ("expose", "/show")
    assert poke_record.getMessage() == "poke expose mark=json id=1"
