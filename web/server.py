import os

from flask import Flask, render_template, request, redirect, url_for, abort
from markupsafe import Markup

from api.client import QuizApiClient, QuizApiError
from api.models import quiz_id
from markup.converter import convert_markup_to_html
from quiz.form import QuizDraft, DIFFICULTIES
from quiz.session import QuizAttempt
from quiz.state import ViewState
from web.presenters import difficulty_badge, visible_tags

QUIZ_LOAD_ERROR = "Failed to load quiz. Please try again later."

app = Flask(
    __name__,
    template_folder=os.path.join(os.path.dirname(__file__), "templates"),
    static_folder=os.path.join(os.path.dirname(__file__), "static"),
)

# Lazy-initialized API client (created on first request, after .env is loaded)
_client = None


def _get_client():
    global _client
    if _client is None:
        _client = QuizApiClient()
    return _client


@app.template_filter("markup")
def markup_filter(text):
    """Render quiz markup as HTML. Output is already escaped, so mark it safe."""
    return Markup(convert_markup_to_html(text))


@app.context_processor
def _presenters():
    return {"difficulty_badge": difficulty_badge, "visible_tags": visible_tags}


@app.route("/")
def index():
    """List available quizzes."""
    state = ViewState().load(lambda: _get_client().list_quizzes())
    if state.is_errored:
        print(f"  Error fetching quizzes: {state.error}")
    quizzes = [q for q in state.data or [] if quiz_id(q.get("id")) is not None]
    return render_template("index.html", state=state, quizzes=quizzes)


@app.route("/quiz/<int:quiz_id>", methods=["GET", "POST"])
def quiz_detail(quiz_id):
    """Show one quiz. A POST carries the chosen answer and reveals the explanation."""
    state = ViewState(error_message=QUIZ_LOAD_ERROR)
    state.load(lambda: _get_client().get_quiz(quiz_id))
    if state.is_errored:
        print(f"  Error fetching quiz {quiz_id}: {state.exception.message}")
        return render_template("quiz.html", state=state, attempt=None), 502

    attempt = QuizAttempt(state.data)
    if request.method == "POST":
        attempt.select(request.form.get("answer"))
    return render_template("quiz.html", state=state, attempt=attempt)


@app.route("/quiz/create", methods=["GET", "POST"])
def create_quiz():
    """Authoring form. Editing buttons re-render; 'submit' posts to the API."""
    if request.method == "GET":
        return _render_form(QuizDraft())

    draft = QuizDraft.from_form(request.form)
    action = request.form.get("action", "submit")

    if action != "submit":
        if not draft.apply_action(action, request.form):
            abort(400)
        return _render_form(draft)

    errors = draft.validate()
    if errors:
        return _render_form(draft, error=" ".join(errors)), 400

    try:
        created = _get_client().create_quiz(draft.to_request())
    except QuizApiError as e:
        print(f"  Error creating quiz: {e.message}")
        return _render_form(draft, error=e.message), 502

    print(f"  Quiz created: {created.get('id', '?') if isinstance(created, dict) else created}")
    return redirect(url_for("index"))


def _render_form(draft, error=None):
    return render_template(
        "create.html",
        draft=draft,
        error=error,
        difficulties=DIFFICULTIES,
    )


def start_server(port=5000):
    """Start the web interface server."""
    print(f"\n{'=' * 60}")
    print(f"  SAT Quiz")
    print(f"  Quiz API: {_get_client().base_url}")
    print(f"  Open http://localhost:{port} in your browser")
    print(f"{'=' * 60}\n")
    app.run(host="0.0.0.0", port=port, debug=False)
