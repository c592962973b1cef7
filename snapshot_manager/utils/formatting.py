"""Formatting utilities."""

from blessed import Terminal


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to max length with suffix."""
    if len(text) <= max_length:
        return text
    if max_length <= len(suffix):
        return text[:max_length]
    return text[: max_length - len(suffix)] + suffix


def fit_width(term: Terminal, text: str, width: int) -> str:
    """Truncate text with ANSI codes to visible width and pad to exact width."""
    if width <= 0:
        return ""
    visible_len = term.length(text)

    if visible_len <= width:
        return text + " " * (width - visible_len)

    # Need to truncate - find approximate position
    ratio = width / visible_len
    truncate_pos = int(len(text) * ratio)

    # Adjust position to get exact visible width
    truncated = text[:truncate_pos]
    while term.length(truncated) > width and truncate_pos > 0:
        truncate_pos -= 1
        truncated = text[:truncate_pos]

    return truncated + term.normal + " " * (width - term.length(truncated))


def wrap_text(term: Terminal, text: str, width: int) -> list[str]:
    """Word-wrap multi-line text, keeping blank lines."""
    lines: list[str] = []
    for paragraph in text.splitlines():
        if not paragraph.strip():
            lines.append("")
            continue
        lines.extend(term.wrap(paragraph, width=max(1, width)) or [""])
    return lines
