"""
Rich-text markup to HTML conversion for quiz solutions.

Solution text uses a small tag vocabulary (color, size, b, i, u, s) plus
newlines. The text is escaped first, then each whitelisted tag pair is
rewritten from its escaped form into HTML, one pass at a time.
"""

import re

# Order matters: '&' first so the other entities are not double-escaped
_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
]

# Hex codes (#rgb, #rgba, #rrggbb, #rrggbbaa) or a plain CSS color name
_COLOR_TOKEN = r"#(?:[0-9a-f]{8}|[0-9a-f]{6}|[0-9a-f]{3,4})|[a-z]+"

_COLOR_RE = re.compile(
    rf"&lt;color=({_COLOR_TOKEN})&gt;(.*?)&lt;/color&gt;", re.IGNORECASE
)
_SIZE_RE = re.compile(r"&lt;size=(\d+)&gt;(.*?)&lt;/size&gt;", re.IGNORECASE)
_NEWLINE_RE = re.compile(r"\r?\n")


def _simple_tag(tag: str) -> re.Pattern:
    return re.compile(rf"&lt;{tag}&gt;(.*?)&lt;/{tag}&gt;", re.IGNORECASE)


def escape_html(text: str) -> str:
    """Replace &, <, >, " and ' with their HTML entities."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def _color(text: str) -> str:
    return _COLOR_RE.sub(r'<span style="color: \1">\2</span>', text)


def _size(text: str) -> str:
    return _SIZE_RE.sub(r'<span style="font-size: \1%">\2</span>', text)


def _wrap(tag: str, element: str):
    pattern = _simple_tag(tag)

    def _pass(text: str) -> str:
        return pattern.sub(rf"<{element}>\1</{element}>", text)

    _pass.__name__ = f"_{element}"
    return _pass


def _newlines(text: str) -> str:
    return _NEWLINE_RE.sub("<br>", text)


# Each pass assumes the previous ones already neutralized raw angle brackets
PASSES = [
    escape_html,
    _color,
    _size,
    _wrap("b", "strong"),
    _wrap("i", "em"),
    _wrap("u", "u"),
    _wrap("s", "del"),
    _newlines,
]


def convert_markup_to_html(text: str) -> str:
    """
    Convert quiz markup into an HTML fragment that is safe to embed.

    Supported tags:
      <color=#ff0000>...</color>   -> <span style="color: #ff0000">
      <size=150>...</size>         -> <span style="font-size: 150%">
      <b>, <i>, <u>, <s>           -> <strong>, <em>, <u>, <del>
      newline                      -> <br>

    Tag pairs match non-greedily, so a span closes at the first matching
    closing tag and nested tags of the same kind are not supported. Unclosed
    tags, tag pairs split across lines and color/size values outside the
    allowed tokens stay as escaped literal text. A "\\r\\n" pair is one break;
    a lone "\\r" is left as it is. Never raises.
    """
    if not text:
        return ""
    for convert in PASSES:
        text = convert(text)
    return text
