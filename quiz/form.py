"""
State of the "Create New Quiz" form.

The web page is server-rendered, so each post rebuilds a QuizDraft from the
submitted fields, applies the button that was pressed (add/remove an option,
step or tag) and renders it again, until the user submits.
"""

DIFFICULTIES = ("easy", "medium", "hard")
STEP_FIELDS = ("Title", "Result", "ImageUrl")
MIN_OPTIONS = 2
MIN_STEPS = 1


def _empty_step() -> dict:
    return {"Title": "", "Result": "", "ImageUrl": ""}


def _parse_index(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class QuizDraft:
    def __init__(self):
        self.question = ""
        self.image_url = ""
        self.options = ["Option 1", ""]
        # The correct answer is tracked by position so it follows edits to its text
        self.correct_index = 0
        self.solution = ""
        self.difficulty = ""
        self.tags = ""
        self.steps = [_empty_step()]

    # ---- Options ----

    @property
    def correct_answer(self) -> str:
        if self.correct_index is None or not 0 <= self.correct_index < len(self.options):
            return ""
        return self.options[self.correct_index]

    def set_option(self, index: int, value: str):
        if 0 <= index < len(self.options):
            self.options[index] = value

    def add_option(self):
        self.options.append("")

    def remove_option(self, index: int) -> bool:
        """Remove an option, keeping at least two. Returns True if removed."""
        if len(self.options) <= MIN_OPTIONS or not 0 <= index < len(self.options):
            return False
        del self.options[index]
        if self.correct_index == index:
            self.correct_index = None
        elif self.correct_index is not None and self.correct_index > index:
            self.correct_index -= 1
        return True

    # ---- Explanation steps ----

    def set_step(self, index: int, field: str, value: str):
        if field not in STEP_FIELDS:
            raise KeyError(f"Unknown step field: {field}")
        if 0 <= index < len(self.steps):
            self.steps[index][field] = value

    def add_step(self):
        self.steps.append(_empty_step())

    def remove_step(self, index: int) -> bool:
        if len(self.steps) <= MIN_STEPS or not 0 <= index < len(self.steps):
            return False
        del self.steps[index]
        return True

    # ---- Tags (kept as the comma-separated text the user typed) ----

    def tag_list(self) -> list:
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    def add_tag(self, tag: str) -> bool:
        tag = (tag or "").strip()
        if not tag or tag in self.tag_list():
            return False
        self.tags = f"{self.tags}, {tag}" if self.tags.strip() else tag
        return True

    def remove_tag(self, index: int) -> bool:
        tags = self.tag_list()
        if not 0 <= index < len(tags):
            return False
        del tags[index]
        self.tags = ", ".join(tags)
        return True

    # ---- Submission ----

    def validate(self) -> list:
        """Return a list of problems; empty when the draft can be submitted."""
        errors = []
        if not self.question.strip():
            errors.append("Question is required.")
        if not self.solution.strip():
            errors.append("Solution is required.")
        filled = [o for o in self.options if o.strip()]
        if len(filled) < MIN_OPTIONS:
            errors.append("At least two options are required.")
        if not self.correct_answer.strip():
            errors.append("Choose which option is the correct answer.")
        if self.difficulty and self.difficulty not in DIFFICULTIES:
            errors.append(f"Unknown difficulty: {self.difficulty}")
        for i, step in enumerate(self.steps, 1):
            if not step["Title"].strip() or not step["Result"].strip():
                errors.append(f"Step {i} needs a title and a result.")
        return errors

    def to_request(self) -> dict:
        """Build the POST /questions/ body."""
        steps = []
        for step in self.steps:
            entry = {"Title": step["Title"], "Result": step["Result"]}
            if step["ImageUrl"]:
                entry["ImageUrl"] = step["ImageUrl"]
            steps.append(entry)

        return {
            "Question": self.question,
            "Solution": self.solution,
            "ImageUrl": self.image_url,
            "Options": [o for o in self.options if o.strip()],
            "CorrectAnswer": self.correct_answer,
            "Difficulty": self.difficulty,
            "Tags": self.tag_list(),
            "Steps": steps,
        }

    # ---- Form round-trip ----

    @classmethod
    def from_form(cls, form) -> "QuizDraft":
        """Rebuild a draft from posted fields (a MultiDict such as request.form)."""
        draft = cls()
        draft.question = form.get("question", "")
        draft.image_url = form.get("image_url", "").strip()
        draft.solution = form.get("solution", "")
        draft.difficulty = form.get("difficulty", "")
        draft.tags = form.get("tags", "")

        options = form.getlist("option")
        if options:
            draft.options = list(options)
        while len(draft.options) < MIN_OPTIONS:
            draft.add_option()
        draft.correct_index = _parse_index(form.get("correct_option"))

        titles = form.getlist("step_title")
        results = form.getlist("step_result")
        images = form.getlist("step_image_url")
        count = max(len(titles), len(results), len(images))
        if count:
            draft.steps = [_empty_step() for _ in range(count)]
            for field, values in (("Title", titles), ("Result", results), ("ImageUrl", images)):
                for i, value in enumerate(values):
                    draft.set_step(i, field, value.strip() if field == "ImageUrl" else value)
        return draft

    def apply_action(self, action: str, form=None) -> bool:
        """Apply an editing button ('add_option', 'remove_step:2', ...).

        Returns False for unknown actions.
        """
        name, _, arg = (action or "").partition(":")
        index = _parse_index(arg)

        if name == "add_option":
            self.add_option()
        elif name == "remove_option" and index is not None:
            self.remove_option(index)
        elif name == "add_step":
            self.add_step()
        elif name == "remove_step" and index is not None:
            self.remove_step(index)
        elif name == "add_tag":
            self.add_tag(form.get("new_tag", "") if form is not None else "")
        elif name == "remove_tag" and index is not None:
            self.remove_tag(index)
        else:
            return False
        return True
