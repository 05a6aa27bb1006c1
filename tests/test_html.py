"""Tests for the HTML preview renderer."""

import re
from dataclasses import replace
from decimal import Decimal

from comisiones.models import ConfigSnapshot
from comisiones.printing.html import HtmlTicketRenderer, escape_html
from comisiones.printing.ticket import format_ticket

PRE_OPEN = '<pre style="font-family:monospace;">'


def _pre_content(html: str) -> str:
    return html.split(PRE_OPEN, 1)[1].split("</pre>", 1)[0]


def test_document_shape(sample_config, sample_tx):
    html = HtmlTicketRenderer().render(sample_config, sample_tx).decode("utf-8")
    assert html.startswith('<!DOCTYPE html>\n<html lang="es">\n')
    assert '<head><meta charset="UTF-8"><title>Ticket</title></head>' in html
    assert html.endswith("</html>")
    assert html.count("<pre") == 1
    assert html.count("</pre>") == 1


def test_pre_holds_the_ticket_text(sample_config, sample_tx):
    html = HtmlTicketRenderer().render(sample_config, sample_tx).decode("utf-8")
    assert _pre_content(html) == format_ticket(sample_config, sample_tx)


def test_is_utf8(sample_config, sample_tx):
    data = HtmlTicketRenderer().render(sample_config, sample_tx)
    assert "Transacción: 42".encode("utf-8") in data


def test_ticket_content_is_escaped(sample_tx):
    config = ConfigSnapshot(legal_name="Tom & Jerry <Ltd>", announcement="<script>&amp;</script>")
    html = HtmlTicketRenderer().render(config, sample_tx).decode("utf-8")
    content = _pre_content(html)
    assert "Tom &amp; Jerry &lt;Ltd&gt;" in content
    assert "&lt;script&gt;&amp;amp;&lt;/script&gt;" in content
    assert "<" not in content
    assert "&" not in re.sub(r"&(amp|lt|gt);", "", content)
    assert html.count("<pre") == 1


def test_escape_order():
    assert escape_html("a & b") == "a &amp; b"
    assert escape_html("&lt;") == "&amp;lt;"
    assert escape_html("<>") == "&lt;&gt;"
    assert escape_html('"quoted"') == '"quoted"'


def test_non_finite_amount_renders(sample_config, sample_tx):
    tx = replace(sample_tx, amount=Decimal("NaN"))
    html = HtmlTicketRenderer().render(sample_config, tx).decode("utf-8")
    assert "Monto:" + " " * 20 + "------" in _pre_content(html)
