import requests

from api.config import get_api_url, get_request_timeout
from api.models import normalize_quiz, normalize_summary, quiz_id


class QuizApiError(Exception):
    """A failed call to the quiz API. The message is safe to show to users."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class QuizApiClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.headers = {"Accept": "application/json"}

    def _request(self, method: str, path: str, payload: dict | None = None):
        """Send one request and return the decoded JSON body.

        Raises QuizApiError for network failures, non-2xx responses and
        bodies that are not JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            resp = requests.request(
                method, url, headers=self.headers, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise QuizApiError(f"Could not reach quiz API: {e}") from e

        if not resp.ok:
            raise QuizApiError(_error_message(resp), status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise QuizApiError("Invalid response from quiz API", status_code=resp.status_code) from e

    def list_quizzes(self) -> list:
        """Fetch all quizzes (summary fields only)."""
        data = self._request("GET", "/questions/")
        if not isinstance(data, list):
            raise QuizApiError("Invalid response from quiz API")
        quizzes = [normalize_summary(item) for item in data if isinstance(item, dict)]
        # Records without a usable id cannot be linked to
        return [q for q in quizzes if q["id"] is not None]

    def get_quiz(self, quiz_id) -> dict:
        """Fetch one quiz with its options, solution and steps."""
        data = self._request("GET", f"/questions/{quiz_id}")
        if not isinstance(data, dict):
            raise QuizApiError("Invalid response from quiz API")
        return normalize_quiz(data)

    def create_quiz(self, payload: dict) -> dict:
        """POST a new quiz. Returns the created resource as sent back by the API."""
        return self._request("POST", "/questions/", payload=payload)


def _error_message(resp) -> str:
    """Prefer the API's own 'message' field, fall back to the status code."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Server error: {resp.status_code}"
