"""Single-page PDF renderer.

Writes a compact PDF 1.4 by hand using the base-14 Courier font, which
is all a 32-column monospaced ticket needs:

    1 Catalog -> 2 Pages -> 3 Page (A4) -> 4 Contents stream
                                        -> 5 Font (Courier)

Object byte offsets are recorded while the objects are appended to the
output buffer, then used to write the cross-reference table and trailer.
"""

import logging
from typing import Any, List, Sequence

from comisiones.printing.base import TicketRenderer
from comisiones.printing.ticket import ticket_lines

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-1.4\n"

# Returned whenever the document cannot be assembled
FALLBACK_PDF = (
    b"%PDF-1.4\n"
    b"%ERR\n"
    b"1 0 obj<<>>endobj\n"
    b"trailer<< /Size 1 >>\n"
    b"startxref\n"
    b"0\n"
    b"%%EOF"
)

# Text placement in PDF user space
FONT_SIZE = 10
ORIGIN_X = 50
ORIGIN_Y = 800
LEADING = 12

# Failures that degrade to FALLBACK_PDF
RECOVERABLE_ERRORS = (
    AttributeError,
    TypeError,
    ValueError,
    ArithmeticError,
    UnicodeError,
    LookupError,
    RuntimeError,
)


def escape_pdf(text: str) -> str:
    """Escape a string for a PDF literal; non-printable ASCII becomes ``?``."""
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    return "".join(ch if 32 <= ord(ch) <= 126 else "?" for ch in escaped)


def content_stream(lines: Sequence[str]) -> bytes:
    """Text-showing operators for the ticket, one line per 12 units down."""
    ops = ["BT", f"/F1 {FONT_SIZE} Tf", f"{ORIGIN_X} {ORIGIN_Y} Td"]
    for index, line in enumerate(lines):
        shown = f"({escape_pdf(line)}) Tj"
        ops.append(shown if index == 0 else f"0 -{LEADING} Td {shown}")
    ops.append("ET")
    return ("\n".join(ops) + "\n").encode("ascii")


def build_pdf(lines: Sequence[str]) -> bytes:
    """Assemble the PDF document for the given ticket lines."""
    stream = content_stream(lines)
    bodies = [
        b"<< /Type /Catalog /Pages 2 0 R >>\n",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>\n",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 595 842] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>\n",
        f"<< /Length {len(stream)} >>\nstream\n".encode("ascii") + stream + b"\nendstream\n\n",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Courier >>\n",
    ]

    out = bytearray(PDF_HEADER)
    offsets: List[int] = []
    for number, body in enumerate(bodies, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode("ascii") + body + b"endobj\n"

    xref_start = len(out)
    size = len(bodies) + 1
    xref = [f"xref\n0 {size}\n", f"{0:010d} {65535:05d} f \n"]
    xref.extend(f"{offset:010d} {0:05d} n \n" for offset in offsets)
    out += "".join(xref).encode("ascii")

    out += (
        "trailer\n"
        f"<< /Size {size} /Root 1 0 R >>\n"
        "startxref\n"
        f"{xref_start}\n"
        "%%EOF"
    ).encode("ascii")
    return bytes(out)


class PdfTicketRenderer(TicketRenderer):
    """One A4 page of Courier 10pt text. Never raises for bad input."""

    output_type = "PDF"

    def render(self, config: Any, tx: Any) -> bytes:
        try:
            lines = ticket_lines(config, tx)
            return build_pdf(lines)
        except RECOVERABLE_ERRORS as exc:
            logger.error(f"PDF ticket assembly failed, using fallback document: {exc!r}")
            return FALLBACK_PDF
