"""Printing module - 32-column ticket text and its encoded formats."""

from comisiones.printing.layout import WIDTH, center_line, label_right, wrap_text
from comisiones.printing.ticket import TicketWidthError, format_ticket, ticket_lines
from comisiones.printing.base import TicketRenderer
from comisiones.printing.html import HtmlTicketRenderer
from comisiones.printing.pdf import PdfTicketRenderer
from comisiones.printing.escpos import EscPosTicketRenderer

__all__ = [
    # Layout
    "WIDTH",
    "center_line",
    "label_right",
    "wrap_text",
    # Formatter
    "TicketWidthError",
    "format_ticket",
    "ticket_lines",
    # Renderers
    "TicketRenderer",
    "HtmlTicketRenderer",
    "PdfTicketRenderer",
    "EscPosTicketRenderer",
]
