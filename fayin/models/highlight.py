from __future__ import annotations
from typing import Iterable
from kivy.utils import escape_markup, get_hex_from_color
from fayin.models.card import Segment


def highlight(text: str, marker: str) -> list[Segment]:
    """Split ``text`` on every literal ``marker`` and tag the marker pieces.

    Empty pieces are kept, so a text ending with the marker yields a trailing
    empty unmarked segment::

        highlight("cat sat", "at")
        # [("c", False), ("at", True), (" s", False), ("at", True), ("", False)]

    An empty marker highlights nothing.
    """
    text = text or ""
    if not marker:
        return [Segment(text, False)]
    pieces = text.split(marker)
    out: list[Segment] = []
    for i, piece in enumerate(pieces):
        out.append(Segment(piece, False))
        if i < len(pieces) - 1:
            out.append(Segment(marker, True))
    return out


def to_markup(segments: Iterable[Segment], color=(0.85, 0.2, 0.2, 1), base_color=None) -> str:
    """Render segments as markup for a Kivy label with ``markup=True``."""
    mark_hex = get_hex_from_color(color)
    base_hex = get_hex_from_color(base_color) if base_color else None
    parts = []
    for seg in segments:
        if not seg.content:
            continue
        s = escape_markup(seg.content)
        if seg.is_marked:
            parts.append(f"[color={mark_hex}]{s}[/color]")
        elif base_hex:
            parts.append(f"[color={base_hex}]{s}[/color]")
        else:
            parts.append(s)
    return "".join(parts)
