#!/usr/bin/env python3
"""CLI tool for rendering transaction tickets to files.

Usage:
    python scripts/export_ticket.py                        Sample ticket, every format
    python scripts/export_ticket.py --input data.json      Ticket from a JSON file
    python scripts/export_ticket.py --type PDF --type PREVIEW_HTML

The JSON file holds two objects, "transaction" and "config", with the
field names of TransactionSnapshot and ConfigSnapshot.

Files are written to COMISIONES_EXPORT__OUTPUT_DIR (default: ./exports).
"""

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from comisiones.config import create_executor, get_settings
from comisiones.export import OutputType, TicketExporter
from comisiones.models import CashierRef, ConfigSnapshot, TransactionSnapshot
from comisiones.printing import format_ticket

logger = logging.getLogger("export_ticket")


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def sample_snapshots() -> tuple[ConfigSnapshot, TransactionSnapshot]:
    """Demo data for a quick look at every format."""
    config = ConfigSnapshot(
        legal_name="Inversiones Yupay S.A.C.",
        business_name="Agente Multired La Esquina",
        address="Av. Los Incas 123, Cusco",
        announcement="Gracias por su preferencia. Conserve este ticket para cualquier reclamo.",
    )
    tx = TransactionSnapshot(
        id=42,
        moment=datetime(2025, 1, 15, 10, 30, 0),
        concept_name="Pago de servicios - Internet 10MB",
        amount=Decimal("100.50"),
        commission=Decimal("5.00"),
        cashier=CashierRef(username="jdoe"),
    )
    return config, tx


def load_snapshots(path: Path) -> tuple[ConfigSnapshot, TransactionSnapshot]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return (
        ConfigSnapshot.from_dict(data.get("config", {})),
        TransactionSnapshot.from_dict(data.get("transaction", {})),
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Render transaction tickets to files")
    parser.add_argument("--input", type=Path, help="JSON file with transaction and config")
    parser.add_argument(
        "--type",
        dest="types",
        action="append",
        choices=[t.name for t in OutputType],
        help="Output type to render (repeatable, default: all)",
    )
    parser.add_argument("--preview", action="store_true", help="Print the ticket text")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.debug)

    try:
        config, tx = load_snapshots(args.input) if args.input else sample_snapshots()
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1

    if args.preview:
        print(format_ticket(config, tx))

    output_dir = settings.export.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    types = [OutputType[name] for name in args.types] if args.types else list(OutputType)
    stem = f"ticket-{tx.id if tx.id is not None else 'sin-id'}"

    with create_executor(settings) as executor:
        exporter = TicketExporter(executor)
        futures = [exporter.export_payload(tx, kind, config) for kind in types]
        for future in futures:
            payload = future.result()
            path = output_dir / payload.filename(stem)
            path.write_bytes(payload.data)
            logger.info(f"Wrote {payload.size} bytes to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
