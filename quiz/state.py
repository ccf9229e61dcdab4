"""Load state of a single page's data fetch: idle -> loading -> loaded | errored."""

from api.client import QuizApiError

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
ERRORED = "errored"


class ViewState:
    def __init__(self, error_message: str | None = None):
        self.status = IDLE
        self.data = None
        self.error = None
        self.exception = None
        # Fixed message shown instead of the API's own, if set
        self.error_message = error_message

    @property
    def is_loading(self) -> bool:
        return self.status in (IDLE, LOADING)

    @property
    def is_loaded(self) -> bool:
        return self.status == LOADED

    @property
    def is_errored(self) -> bool:
        return self.status == ERRORED

    def load(self, fetch):
        """Run fetch() and record its result or its QuizApiError.

        Any other exception propagates; the state is left as 'loading'.
        """
        self.status = LOADING
        self.data = None
        self.error = None
        self.exception = None
        try:
            self.data = fetch()
        except QuizApiError as e:
            self.exception = e
            self.error = self.error_message or e.message
            self.status = ERRORED
            return self
        self.status = LOADED
        return self
