import argparse
import os
import sys

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

from api.client import QuizApiClient, QuizApiError
from api.config import get_web_port
from markup.converter import convert_markup_to_html


def _print_quizzes(client):
    quizzes = client.list_quizzes()
    if not quizzes:
        print("No quizzes found.")
        return
    for quiz in quizzes:
        difficulty = quiz["Difficulty"] or "Mystery"
        tags = ", ".join(quiz["Tags"])
        line = f"  [{quiz['id']}] ({difficulty}) {quiz['Question']}"
        if tags:
            line += f"  #{tags}"
        print(line)


def _render_file(path):
    """Convert a markup file ('-' for stdin) and print the HTML."""
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    print(convert_markup_to_html(text))


def run_cli(argv=None):
    """Start the web interface, or run a one-off command."""
    parser = argparse.ArgumentParser(
        description="SAT Quiz — browse, answer and author quizzes from the quiz API"
    )
    parser.add_argument(
        "--web",
        action="store_true",
        help="Launch the web interface (default)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for the web interface (overrides QUIZ_WEB_PORT)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the available quizzes and exit",
    )
    parser.add_argument(
        "--render",
        metavar="PATH",
        help="Convert a markup file to HTML ('-' reads stdin)",
    )
    args = parser.parse_args(argv)

    if args.render:
        try:
            _render_file(args.render)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}")
            sys.exit(1)
        return

    if args.list:
        try:
            _print_quizzes(QuizApiClient())
        except QuizApiError as e:
            print(f"Error: {e.message}")
            sys.exit(1)
        return

    from web.server import start_server
    start_server(port=args.port or get_web_port())


if __name__ == "__main__":
    run_cli()
