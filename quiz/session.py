from markup.converter import convert_markup_to_html


class QuizAttempt:
    """One learner's pass over a single quiz: pick an answer, then see the explanation."""

    def __init__(self, quiz: dict):
        self.quiz = quiz
        self.selected_answer = None

    @property
    def answered(self) -> bool:
        return self.selected_answer is not None

    @property
    def show_explanation(self) -> bool:
        return self.answered

    @property
    def is_correct(self) -> bool:
        return self.answered and self.selected_answer == self.quiz.get("CorrectAnswer")

    def select(self, answer) -> bool:
        """Record the answer. Returns False if already answered or not an option."""
        if self.answered:
            return False
        if answer not in self.quiz.get("Options", []):
            return False
        self.selected_answer = answer
        return True

    def option_state(self, option: str) -> str:
        if not self.answered or option != self.selected_answer:
            return "idle"
        return "correct" if self.is_correct else "incorrect"

    @property
    def solution_html(self) -> str:
        return convert_markup_to_html(self.quiz.get("Solution", ""))
