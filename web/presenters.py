"""Display helpers for the quiz list cards."""

DIFFICULTY_ICONS = {
    "easy": "\U0001F9E0",  # brain
    "medium": "\u26A1",  # zap
    "hard": "\U0001F525",  # flame
    "default": "\u2753",  # question mark
}

DIFFICULTY_CLASSES = {
    "easy": "badge-easy",
    "medium": "badge-medium",
    "hard": "badge-hard",
    "default": "badge-default",
}

DEFAULT_LABEL = "Mystery"
MAX_VISIBLE_TAGS = 2


def difficulty_badge(difficulty) -> dict:
    """Icon, CSS class and label for a difficulty level.

    Unknown levels keep their own label but get the default styling.
    """
    key = difficulty.lower() if isinstance(difficulty, str) and difficulty.lower() in DIFFICULTY_ICONS else "default"
    return {
        "label": difficulty or DEFAULT_LABEL,
        "icon": DIFFICULTY_ICONS[key],
        "css_class": DIFFICULTY_CLASSES[key],
    }


def visible_tags(tags, limit: int = MAX_VISIBLE_TAGS):
    """Return (tags to show, number hidden behind a '+N' chip)."""
    tags = list(tags or [])
    return tags[:limit], max(len(tags) - limit, 0)
