"""
Shared fixtures for the ticket export tests.

Provides sample snapshots and a recording executor that tells whether
anything was scheduled.
"""

from concurrent.futures import Executor, Future
from datetime import datetime
from decimal import Decimal

import pytest

from comisiones.config.settings import get_settings
from comisiones.models import CashierRef, ConceptRef, ConfigSnapshot, TransactionSnapshot


class RecordingExecutor(Executor):
    """Runs submitted calls inline and remembers them."""

    def __init__(self):
        self.calls = []

    def submit(self, fn, /, *args, **kwargs):
        self.calls.append((fn, args, kwargs))
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep stray .env files and cached settings out of every test."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recording_executor():
    return RecordingExecutor()


@pytest.fixture
def sample_tx():
    """Transaction used throughout: id 42, S/. 100.50 with S/. 5.00 commission."""
    return TransactionSnapshot(
        id=42,
        moment=datetime(2025, 1, 15, 10, 30, 0),
        concept_name="Internet 10MB",
        amount=Decimal("100.50"),
        commission=Decimal("5.00"),
        cashier=CashierRef(username="jdoe"),
    )


@pytest.fixture
def sample_config():
    return ConfigSnapshot(legal_name="Acme Corp")


@pytest.fixture
def full_config():
    return ConfigSnapshot(
        legal_name="Inversiones Yupay S.A.C.",
        business_name="Agente Multired La Esquina",
        address="Av. Los Incas 123, Urb. Santa Monica, Cusco",
        announcement="Gracias por su preferencia. Conserve este ticket.",
    )


@pytest.fixture
def live_concept_tx(sample_tx):
    """Transaction without a name snapshot, pointing at a live concept."""
    return TransactionSnapshot(
        id=sample_tx.id,
        moment=sample_tx.moment,
        concept=ConceptRef(name="Recarga celular"),
        amount=sample_tx.amount,
        commission=sample_tx.commission,
        cashier=sample_tx.cashier,
    )
