"""Layout primitives for 32-column thermal tickets.

Handles word wrapping, centering and label/value alignment for the
fixed-width text every renderer prints from (58mm paper, 32 characters
per line in the printer's font A).
"""

from typing import List, Optional

# Characters per printed line
WIDTH = 32


def wrap_text(text: Optional[str], max_chars: int = WIDTH, center: bool = False) -> List[str]:
    """Wrap text to fit within the given width.

    Explicit line breaks start a new paragraph. Each paragraph is trimmed and
    broken at the last space that keeps the line within ``max_chars``; words
    longer than the width are hard-cut. Blank paragraphs are kept as empty
    lines so paragraph spacing survives.

    Args:
        text: Text to wrap, None yields no lines
        max_chars: Maximum characters per line
        center: Center every resulting line within ``max_chars``

    Returns:
        Wrapped lines, never None
    """
    lines: List[str] = []
    if text is None:
        return lines

    for paragraph in text.splitlines() or [""]:
        remaining = paragraph.strip()
        while remaining:
            if len(remaining) <= max_chars:
                lines.append(remaining)
                break
            break_at = remaining.rfind(" ", 0, max_chars + 1)
            if break_at <= 0:
                break_at = max_chars
            lines.append(remaining[:break_at].strip())
            remaining = remaining[break_at:].strip()

        if not paragraph.strip():
            lines.append("")

    if center:
        return [center_line(line, max_chars) for line in lines]
    return lines


def center_line(line: Optional[str], width: int = WIDTH) -> str:
    """Center a line within the ticket width.

    Odd padding goes to the right. Blank lines become a full line of
    spaces; lines at or above the width are truncated.
    """
    if line is None or not line.strip():
        return " " * width

    text = line.strip()
    if len(text) >= width:
        return text[:width]

    total = width - len(text)
    left = total // 2
    right = total - left
    return " " * left + text + " " * right


def label_right(label: Optional[str], value: Optional[str], width: int = WIDTH) -> str:
    """Left-align a label and right-align its value on one line.

    At least one space always separates them; when both do not fit, the
    result is wider than ``width`` and left for the caller to clamp.
    """
    label = label or ""
    value = value or ""
    spaces = max(1, width - len(label) - len(value))
    return label + " " * spaces + value


def single_line(text: str) -> str:
    """Collapse embedded line breaks so a value prints on one line."""
    return " ".join(part.strip() for part in text.splitlines() if part.strip())
