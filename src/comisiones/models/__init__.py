"""Read-only snapshot models consumed by the ticket export pipeline."""

from comisiones.models.snapshots import (
    CashierRef,
    ConceptRef,
    ConfigSnapshot,
    TransactionSnapshot,
)

__all__ = [
    "CashierRef",
    "ConceptRef",
    "ConfigSnapshot",
    "TransactionSnapshot",
]
