"""Tests for the ESC/POS printer renderer."""

from dataclasses import replace
from decimal import Decimal

from comisiones.models import ConfigSnapshot
from comisiones.printing import escpos
from comisiones.printing.escpos import EscPosTicketRenderer, to_ascii
from comisiones.printing.ticket import format_ticket

INIT = b"\x1b@"
FULL_CUT = b"\x1dVB\x00"


def test_framing(sample_config, sample_tx):
    data = EscPosTicketRenderer().render(sample_config, sample_tx)
    assert data[:2] == bytes([0x1B, ord("@")])
    assert data[-4:] == bytes([0x1D, ord("V"), 66, 0])


def test_body_is_ascii_ticket_with_trailing_newline(sample_config, sample_tx):
    data = EscPosTicketRenderer().render(sample_config, sample_tx)
    body = data[len(INIT):-len(FULL_CUT)]
    assert body == to_ascii(format_ticket(sample_config, sample_tx) + "\n")
    assert body.endswith(b"Usuario: jdoe\n")
    assert all(byte < 128 for byte in body)


def test_accents_become_stars(sample_config, sample_tx):
    data = EscPosTicketRenderer().render(sample_config, sample_tx)
    assert b"Transacci*n: 42\n" in data
    assert b"Comisi*n:" in data


def test_announcement_with_symbols(sample_tx):
    config = ConfigSnapshot(announcement="Año nuevo €")
    data = EscPosTicketRenderer().render(config, sample_tx)
    assert b"A*o nuevo *" in data
    assert data.endswith(FULL_CUT)


def test_to_ascii_one_star_per_character():
    assert to_ascii("año €") == b"a*o *"
    assert to_ascii("😀!") == b"*!"
    assert to_ascii("plain") == b"plain"


def test_to_ascii_lone_surrogate():
    assert to_ascii("a\ud800b") == b"a*b"


def test_regex_fallback_when_encoder_fails(monkeypatch):
    monkeypatch.setattr(escpos, "_ERROR_HANDLER", "strict")
    assert to_ascii("año €") == b"a*o *"


def test_non_finite_amounts_print_placeholder(sample_config, sample_tx):
    tx = replace(sample_tx, amount=Decimal("Infinity"), commission=Decimal("NaN"))
    data = EscPosTicketRenderer().render(sample_config, tx)
    assert data.endswith(FULL_CUT)
    assert b"Monto:" + b" " * 20 + b"------\n" in data
    assert b"Comisi*n:" + b" " * 17 + b"------\n" in data
