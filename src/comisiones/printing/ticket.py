"""Ticket formatter shared by every renderer.

Turns a configuration snapshot and a transaction snapshot into the
32-column text of a ticket:
- Business header (legal name, business name, address), centered
- Transaction id, date and time
- Concept, wrapped without repeating its label
- Amount and commission, right-aligned in Peruvian Soles
- Cashier username
- Optional announcement, centered

Missing data never fails: it prints as an empty value or as ``------``.
"""

import logging
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any, List, Optional

from comisiones.config.settings import get_settings
from comisiones.printing.layout import WIDTH, label_right, single_line, wrap_text

logger = logging.getLogger(__name__)

PLACEHOLDER = "------"
DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M:%S"
CURRENCY_PREFIX = "S/. "

_CENTS = Decimal("0.01")


class TicketWidthError(ValueError):
    """A formatted line does not fit the ticket width."""


def _safe(value: Any) -> str:
    """String form of a nullable value, trimmed."""
    return "" if value is None else str(value).strip()


def format_money(value: Any) -> str:
    """Format an amount as Peruvian Soles, e.g. ``S/. 1,234.50``."""
    if value is None:
        return PLACEHOLDER
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        return PLACEHOLDER
    amount = amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_PREFIX}{abs(amount):,.2f}"


def resolve_concept(tx: Any) -> str:
    """Concept name to print for a transaction.

    The name snapshot wins; otherwise the live concept's name. A live
    concept without a usable name prints as the placeholder. Without any
    concept information the result is empty.
    """
    snapshot = _safe(getattr(tx, "concept_name", None))
    if snapshot:
        return snapshot

    concept = getattr(tx, "concept", None)
    if concept is None:
        return ""
    return _safe(getattr(concept, "name", None)) or PLACEHOLDER


def _header(config: Any) -> List[str]:
    lines: List[str] = []
    for field in ("legal_name", "business_name", "address"):
        text = _safe(getattr(config, field, None))
        if text:
            lines.extend(wrap_text(text, WIDTH, center=True))
    return lines


def _clamp(lines: List[str], strict: bool) -> List[str]:
    clamped = []
    for line in lines:
        if len(line) > WIDTH:
            if strict:
                raise TicketWidthError(f"Line exceeds {WIDTH} columns: {line!r}")
            logger.warning(f"Truncating ticket line of {len(line)} columns: {line!r}")
            line = line[:WIDTH]
        clamped.append(line)
    return clamped


def ticket_lines(config: Any, tx: Any, strict_width: Optional[bool] = None) -> List[str]:
    """Format a ticket as a list of lines, top to bottom.

    Args:
        config: Configuration snapshot (legal_name, business_name, address, announcement)
        tx: Transaction snapshot (id, moment, concept_name, concept, amount, commission, cashier)
        strict_width: Raise TicketWidthError instead of truncating over-wide
            lines. Defaults to the ``export.strict_width`` setting.

    Returns:
        Lines of at most WIDTH characters

    Raises:
        ValueError: If config or tx is None
    """
    if config is None:
        raise ValueError("config is required")
    if tx is None:
        raise ValueError("tx is required")
    if strict_width is None:
        strict_width = get_settings().export.strict_width

    lines = _header(config)

    lines.append("Transacción: " + single_line(_safe(getattr(tx, "id", None))))

    moment = getattr(tx, "moment", None)
    lines.append("Fecha: " + (moment.strftime(DATE_FORMAT) if moment is not None else ""))
    lines.append("Hora : " + (moment.strftime(TIME_FORMAT) if moment is not None else ""))

    concept = resolve_concept(tx)
    if concept:
        lines.extend(wrap_text("Concepto: " + concept, WIDTH))
    else:
        lines.append("Concepto:")

    lines.append(label_right("Monto:", format_money(getattr(tx, "amount", None))))
    lines.append(label_right("Comisión:", format_money(getattr(tx, "commission", None))))

    cashier = getattr(tx, "cashier", None)
    username = _safe(getattr(cashier, "username", None)) if cashier is not None else ""
    lines.append("Usuario: " + single_line(username))

    announcement = _safe(getattr(config, "announcement", None))
    if announcement:
        lines.append("")
        lines.extend(wrap_text(announcement, WIDTH, center=True))

    return _clamp(lines, strict_width)


def format_ticket(config: Any, tx: Any, strict_width: Optional[bool] = None) -> str:
    """Format a ticket as newline-separated text."""
    return "\n".join(ticket_lines(config, tx, strict_width))
