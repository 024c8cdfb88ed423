"""Tests for WorldCupWinnersAPI with a fake requests session."""

import json

import requests

from world_cup_client import ACCESS_TOKEN_HEADER, WorldCupWinnersAPI


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://testserver"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Records every request and answers with queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def _client(session, token="s3cr3t"):
    return WorldCupWinnersAPI(base_url="http://testserver/", access_token=token, session=session)


def test_ping_true_on_no_content():
    session = FakeSession(_response(204))
    assert _client(session).ping()
    assert session.calls[0]["url"] == "http://testserver/"


def test_ping_false_on_connection_error():
    session = FakeSession(requests.ConnectionError("refused"))
    assert not _client(session).ping()


def test_list_winners_returns_list():
    winners = [{"country": "France", "year": 2018}]
    session = FakeSession(_response(200, {"winners": winners}))
    result, error = _client(session).list_winners()
    assert error is None
    assert result == winners
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://testserver/winners"
    assert call["params"] is None
    assert ACCESS_TOKEN_HEADER not in call["headers"]


def test_list_winners_forwards_year_filter():
    session = FakeSession(_response(200, {"winners": []}))
    result, error = _client(session).list_winners(year=2018)
    assert (result, error) == ([], None)
    assert session.calls[0]["params"] == {"year": 2018}


def test_list_winners_maps_bad_request():
    session = FakeSession(_response(400))
    result, error = _client(session).list_winners(year=2018)
    assert result == []
    assert error == {"status_code": 400, "message": "Invalid year filter"}


def test_add_winner_sends_token_and_payload():
    session = FakeSession(_response(201))
    created, error = _client(session).add_winner("Croatia", 2030)
    assert created and error is None
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"country": "Croatia", "year": 2030}
    assert call["headers"][ACCESS_TOKEN_HEADER] == "s3cr3t"


def test_add_winner_uses_detail_from_error_body():
    session = FakeSession(_response(422, {"detail": "year must be greater than 2018"}))
    created, error = _client(session).add_winner("Croatia", 1984)
    assert not created
    assert error == {"status_code": 422, "message": "year must be greater than 2018"}


def test_add_winner_unauthorized():
    session = FakeSession(_response(401))
    created, error = _client(session).add_winner("Croatia", 2030)
    assert not created
    assert error["status_code"] == 401


def test_add_winner_without_token_does_not_call_api():
    session = FakeSession()
    created, error = _client(session, token=None).add_winner("Croatia", 2030)
    assert not created
    assert error["status_code"] is None
    assert session.calls == []


def test_list_winners_unexpected_shape_is_an_error():
    session = FakeSession(_response(200, [{"country": "France", "year": 2018}]))
    result, error = _client(session).list_winners()
    assert result == []
    assert error == {"status_code": 200, "message": "Unexpected response shape"}
