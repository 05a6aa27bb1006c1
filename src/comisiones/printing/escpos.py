"""ESC/POS renderer for thermal ticket printers.

Output is ``ESC @`` (initialize), the ticket as ASCII text with a
trailing newline, then ``GS V B 0`` (full paper cut).
"""

import codecs
import logging
import re
from typing import Any

from comisiones.printing.base import TicketRenderer
from comisiones.printing.ticket import format_ticket

logger = logging.getLogger(__name__)

ASCII_REPLACEMENT = "*"
_ERROR_HANDLER = "escpos-replace"
_NON_ASCII = re.compile(r"[^\x00-\x7f]")


def _replace_unencodable(exc: UnicodeError):
    """Codec error handler: one ``*`` per character ASCII cannot encode."""
    if isinstance(exc, UnicodeEncodeError):
        return ASCII_REPLACEMENT * (exc.end - exc.start), exc.end
    raise exc


codecs.register_error(_ERROR_HANDLER, _replace_unencodable)


def to_ascii(text: str) -> bytes:
    """Encode text as ASCII, replacing anything else with ``*``."""
    try:
        return text.encode("ascii", errors=_ERROR_HANDLER)
    except UnicodeError as exc:
        logger.warning(f"ASCII encoder failed, substituting non-ASCII characters: {exc!r}")
        return _NON_ASCII.sub(ASCII_REPLACEMENT, text).encode("ascii")


class EscPosTicketRenderer(TicketRenderer):
    """Raw ESC/POS bytes ready to send to a receipt printer."""

    output_type = "PRINTER_TICKET"

    # ESC/POS command constants
    ESC = b'\x1b'
    GS = b'\x1d'

    def render(self, config: Any, tx: Any) -> bytes:
        content = format_ticket(config, tx) + "\n"
        return self._cmd_init() + to_ascii(content) + self._cmd_cut()

    def _cmd_init(self) -> bytes:
        """Initialize printer command."""
        return self.ESC + b'@'

    def _cmd_cut(self) -> bytes:
        """Full paper cut command (GS V 66 0)."""
        return self.GS + b'V' + bytes([66, 0])
