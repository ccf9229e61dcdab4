"""Tests for api.client — requests are replaced with canned responses."""

import pytest
import requests

import api.client as client_module
from api.client import QuizApiClient, QuizApiError
from api.config import get_api_url, get_request_timeout, get_web_port

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._body = body

    def json(self):
        if self._body is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._body


@pytest.fixture
def calls(monkeypatch):
    """Record outgoing requests; tests set calls.response to what comes back."""

    class Recorder(list):
        response = FakeResponse(200, [])

    recorder = Recorder()

    def fake_request(method, url, **kwargs):
        recorder.append({"method": method, "url": url, **kwargs})
        if isinstance(recorder.response, Exception):
            raise recorder.response
        return recorder.response

    monkeypatch.setattr(client_module.requests, "request", fake_request)
    return recorder


@pytest.fixture
def client():
    return QuizApiClient(base_url="http://api.test/", timeout=3)


class TestListQuizzes:

    def test_hits_questions_endpoint(self, client, calls):
        client.list_quizzes()
        assert calls[0]["method"] == "GET"
        assert calls[0]["url"] == "http://api.test/questions/"
        assert calls[0]["timeout"] == 3

    def test_normalizes_missing_fields(self, client, calls):
        calls.response = FakeResponse(200, [{"id": 1, "Question": "2+2?"}])
        quizzes = client.list_quizzes()
        assert quizzes == [{"id": 1, "Question": "2+2?", "Difficulty": None, "Tags": []}]

    def test_drops_records_without_usable_id(self, client, calls):
        calls.response = FakeResponse(200, [
            {"Question": "no id"},
            {"id": None, "Question": "null id"},
            {"id": True, "Question": "bool id"},
            {"id": "12", "Question": "string id"},
            {"id": 5, "Question": "int id"},
        ])
        quizzes = client.list_quizzes()
        assert [q["id"] for q in quizzes] == [12, 5]

    def test_non_list_body_is_error(self, client, calls):
        calls.response = FakeResponse(200, {"oops": True})
        with pytest.raises(QuizApiError):
            client.list_quizzes()


class TestGetQuiz:

    def test_fetches_by_id(self, client, calls):
        calls.response = FakeResponse(200, {
            "id": 7,
            "Question": "Pick one",
            "Solution": "<b>B</b>",
            "Options": ["A", "B"],
            "CorrectAnswer": "B",
            "ImageUrl": "",
            "Steps": [{"Title": "Look", "Result": "B"}],
            "Tags": ["algebra"],
            "Difficulty": "easy",
        })
        quiz = client.get_quiz(7)
        assert calls[0]["url"] == "http://api.test/questions/7"
        assert quiz["ImageUrl"] is None
        assert quiz["Steps"] == [{"Title": "Look", "Result": "B", "ImageUrl": None}]
        assert quiz["CorrectAnswer"] == "B"

    def test_not_found_uses_status(self, client, calls):
        calls.response = FakeResponse(404, _NO_JSON)
        with pytest.raises(QuizApiError) as exc:
            client.get_quiz(99)
        assert exc.value.status_code == 404
        assert exc.value.message == "Server error: 404"


class TestCreateQuiz:

    def test_posts_json_payload(self, client, calls):
        calls.response = FakeResponse(201, {"id": 12})
        payload = {"Question": "Q", "Options": ["a", "b"]}
        assert client.create_quiz(payload) == {"id": 12}
        assert calls[0]["method"] == "POST"
        assert calls[0]["url"] == "http://api.test/questions/"
        assert calls[0]["json"] == payload

    def test_error_body_message_is_surfaced(self, client, calls):
        calls.response = FakeResponse(422, {"message": "CorrectAnswer must be one of Options"})
        with pytest.raises(QuizApiError) as exc:
            client.create_quiz({})
        assert str(exc.value) == "CorrectAnswer must be one of Options"
        assert exc.value.status_code == 422

    def test_error_without_message(self, client, calls):
        calls.response = FakeResponse(500, {"detail": "boom"})
        with pytest.raises(QuizApiError, match="Server error: 500"):
            client.create_quiz({})


class TestFailures:

    def test_network_failure_is_wrapped(self, client, calls):
        calls.response = requests.ConnectionError("connection refused")
        with pytest.raises(QuizApiError) as exc:
            client.list_quizzes()
        assert "Could not reach quiz API" in exc.value.message
        assert exc.value.status_code is None

    def test_invalid_json_on_success(self, client, calls):
        calls.response = FakeResponse(200, _NO_JSON)
        with pytest.raises(QuizApiError, match="Invalid response"):
            client.list_quizzes()


class TestConfig:

    def test_default_url(self, monkeypatch):
        monkeypatch.delenv("QUIZ_API_URL", raising=False)
        assert get_api_url() == "https://satquiz.onrender.com"

    def test_url_from_env_strips_slash(self, monkeypatch):
        monkeypatch.setenv("QUIZ_API_URL", "http://localhost:8000/")
        assert get_api_url() == "http://localhost:8000"
        assert QuizApiClient().base_url == "http://localhost:8000"

    def test_invalid_timeout_falls_back(self, monkeypatch, capsys):
        monkeypatch.setenv("QUIZ_API_TIMEOUT", "soon")
        assert get_request_timeout() == 10.0
        assert "Warning" in capsys.readouterr().out

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
    def test_non_finite_timeout_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("QUIZ_API_TIMEOUT", raw)
        assert get_request_timeout() == 10.0

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("QUIZ_WEB_PORT", "8080")
        assert get_web_port() == 8080

    def test_negative_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("QUIZ_WEB_PORT", "-1")
        assert get_web_port() == 5000
