"""Normalize quiz records returned by the API so optional fields are always present."""


def _image_url(value):
    # The API sends both null and "" for a missing image
    return value or None


def _string_list(value) -> list:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def quiz_id(value):
    """Integer id of a quiz record, or None when missing or malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def normalize_step(data: dict) -> dict:
    return {
        "Title": data.get("Title") or "",
        "Result": data.get("Result") or "",
        "ImageUrl": _image_url(data.get("ImageUrl")),
    }


def normalize_summary(data: dict) -> dict:
    """Shape of one entry of GET /questions/."""
    return {
        "id": quiz_id(data.get("id")),
        "Question": data.get("Question") or "",
        "Difficulty": data.get("Difficulty") or None,
        "Tags": _string_list(data.get("Tags")),
    }


def normalize_quiz(data: dict) -> dict:
    """Shape of GET /questions/{id}."""
    quiz = normalize_summary(data)
    steps = data.get("Steps")
    quiz.update({
        "Solution": data.get("Solution") or "",
        "Steps": [normalize_step(s) for s in steps if isinstance(s, dict)] if isinstance(steps, list) else [],
        "Options": _string_list(data.get("Options")),
        "ImageUrl": _image_url(data.get("ImageUrl")),
        "CorrectAnswer": data.get("CorrectAnswer") or "",
    })
    return quiz
