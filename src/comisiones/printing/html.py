"""HTML preview renderer."""

from typing import Any

from comisiones.printing.base import TicketRenderer
from comisiones.printing.ticket import format_ticket


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; ``&`` goes first so entities stay intact."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class HtmlTicketRenderer(TicketRenderer):
    """Minimal UTF-8 HTML5 document with the ticket in a single <pre> block."""

    output_type = "PREVIEW_HTML"

    def render(self, config: Any, tx: Any) -> bytes:
        content = escape_html(format_ticket(config, tx))
        html = (
            "<!DOCTYPE html>\n"
            '<html lang="es">\n'
            '<head><meta charset="UTF-8"><title>Ticket</title></head>\n'
            f'<body><pre style="font-family:monospace;">{content}</pre></body>\n'
            "</html>"
        )
        return html.encode("utf-8")
