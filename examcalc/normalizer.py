"""Rewrite display glyphs into the canonical ASCII the parser accepts."""

import re

_WHITESPACE_RE = re.compile(r"\s+")
_ANS_RE = re.compile(r"ans", re.IGNORECASE)

_GLYPHS = {
    "π": "pi",
    "×": "*",
    "·": "*",
    "⋅": "*",
    "∗": "*",
    "✕": "*",
    "÷": "/",
    "∕": "/",
    "–": "-",
    "—": "-",
    "−": "-",
    "‒": "-",
    "﹣": "-",
    "－": "-",
    "‐": "-",
    "‑": "-",
    "⁻": "-",
    "√": "sqrt",
}
_GLYPH_RE = re.compile("|".join(map(re.escape, _GLYPHS)))


def normalize(text: str) -> str:
    # Whitespace goes first so joining fragments like "A NS" cannot create new
    # matches on a second pass.
    text = _WHITESPACE_RE.sub("", text or "")
    text = _GLYPH_RE.sub(lambda m: _GLYPHS[m.group(0)], text)
    return _ANS_RE.sub("ans", text)
