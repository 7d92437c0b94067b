"""Terminal text utilities: display-width measurement and word wrapping.

Widths are measured per grapheme cluster so that wide East Asian characters,
combining marks and emoji sequences occupy the number of terminal columns a
terminal actually draws for them.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth

TAB = "   "


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _remember(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(cluster: str) -> int:
    """Return the number of terminal columns a single grapheme cluster uses.

    Control characters and clusters led by a combining mark or format
    character take no space. Multi-codepoint clusters carrying an emoji
    marker (VS16, ZWJ, skin tone modifier, regional indicator) or led by an
    emoji, symbol or dingbat codepoint take two. Everything else is delegated to wcwidth for the leading codepoint.
    """
    if not cluster:
        return 0

    lead = cluster[0]
    cp = ord(lead)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0

    if len(cluster) > 1:
        for ch in cluster:
            marker = ord(ch)
            if marker in (0xFE0F, 0x200D):
                return 2
            if 0x1F3FB <= marker <= 0x1F3FF or 0x1F1E6 <= marker <= 0x1F1FF:
                return 2
        # Emoji blocks, miscellaneous symbols and dingbats
        if cp >= 0x1F000 or 0x2600 <= cp <= 0x27BF:
            return 2
        if unicodedata.category(lead) in ("Mn", "Me", "Mc", "Cf"):
            return 0

    return max(_wcwidth.wcwidth(lead), 0)


# ---------------------------------------------------------------------------
# visible_width / cell_width
# ---------------------------------------------------------------------------


def visible_width(text: str) -> int:
    """Calculate the terminal width of a single line of *text*.

    Tabs count as three spaces. Printable ASCII takes a fast path; other
    strings are measured by grapheme cluster and cached.
    """
    if not text:
        return 0

    text = text.replace("\t", TAB)
    if all(0x20 <= ord(ch) <= 0x7E for ch in text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    return _remember(text, sum(grapheme_width(g) for g in grapheme.graphemes(text)))


def cell_width(text: str) -> int:
    """Return the width of the widest physical line in *text*."""
    return max(visible_width(line) for line in text.split("\n"))


def pad_to_width(text: str, width: int) -> str:
    """Left-justify *text* by appending spaces up to *width* columns."""
    return text + " " * max(0, width - visible_width(text))


# ---------------------------------------------------------------------------
# wrap_text
# ---------------------------------------------------------------------------


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap *text* to *width* columns.

    Embedded newlines always start a new line. Lines break at the last space
    that fits; a word wider than *width* is broken mid-word. Spaces at a
    break point are consumed, every other character is kept in order.
    A single grapheme wider than *width* still gets a line of its own.

    Always returns at least one line.
    """
    if width <= 0:
        return [text]

    result: list[str] = []
    for physical_line in text.replace("\t", TAB).split("\n"):
        result.extend(_wrap_single_line(physical_line, width))
    return result


def _wrap_single_line(line: str, width: int) -> list[str]:
    if not line:
        return [""]

    lines: list[str] = []
    current: list[tuple[str, int]] = []
    current_width = 0

    for g in grapheme.graphemes(line):
        if g == " " and not current and lines:
            continue

        g_width = grapheme_width(g)
        if current_width + g_width > width and current_width > 0:
            indent_only = not _strip_leading_spaces(current)
            if g == " ":
                if not indent_only:
                    lines.append(_join(current))
                    current, current_width = [], 0
                continue

            split = _last_space(current)
            if split is None:
                if not indent_only:
                    lines.append(_join(current))
                current = []
            else:
                lines.append(_join(current[:split]))
                current = _strip_leading_spaces(current[split + 1 :])
            current_width = sum(w for _, w in current)

        current.append((g, g_width))
        current_width += g_width

    if current or not lines:
        lines.append(_join(current))
    return lines


def _join(parts: list[tuple[str, int]]) -> str:
    return "".join(g for g, _ in parts).rstrip(" ")


def _last_space(parts: list[tuple[str, int]]) -> int | None:
    """Index of the last space in *parts* that follows visible text.

    Spaces in the leading run are indentation, not break points.
    """
    lead = 0
    while lead < len(parts) and parts[lead][0] == " ":
        lead += 1
    for i in range(len(parts) - 1, lead, -1):
        if parts[i][0] == " ":
            return i
    return None


def _strip_leading_spaces(parts: list[tuple[str, int]]) -> list[tuple[str, int]]:
    i = 0
    while i < len(parts) and parts[i][0] == " ":
        i += 1
    return parts[i:]
