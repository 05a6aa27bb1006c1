"""
Snapshot value objects for transactions and business configuration.

These are denormalized, read-only copies of the data a ticket is printed
from. The formatter only reads attributes, so any object exposing the same
names (ORM rows, test doubles) can be used in their place.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional


def _parse_moment(value: Any) -> Optional[datetime]:
    """Parse an ISO timestamp, accepting a trailing ``Z`` as UTC."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError(f"Invalid moment: {value!r}") from exc
    raise ValueError(f"Invalid moment: {value!r}")


def _parse_money(value: Any) -> Optional[Decimal]:
    """Parse a money field; NaN and infinities are rejected."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    else:
        raise ValueError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


@dataclass(frozen=True)
class CashierRef:
    """The user who registered the transaction."""

    username: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["CashierRef"]:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(username=value.get("username"))
        return cls(username=str(value))


@dataclass(frozen=True)
class ConceptRef:
    """Live concept entity, used when the transaction has no name snapshot."""

    name: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["ConceptRef"]:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(name=value.get("name"))
        return cls(name=str(value))


@dataclass(frozen=True)
class TransactionSnapshot:
    """A financial transaction as it was when registered.

    Attributes:
        id: Transaction identifier
        moment: When the transaction happened
        concept_name: Concept name copied at registration time
        concept: Live concept, fallback when concept_name is blank
        amount: Operation amount
        commission: Commission charged
        cashier: User who registered the transaction
    """

    id: Any = None
    moment: Optional[datetime] = None
    concept_name: Optional[str] = None
    concept: Optional[ConceptRef] = None
    amount: Optional[Decimal] = None
    commission: Optional[Decimal] = None
    cashier: Optional[CashierRef] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransactionSnapshot":
        """Build a snapshot from a plain mapping (e.g. decoded JSON).

        Raises:
            ValueError: If the moment or a money field cannot be parsed
        """
        return cls(
            id=data.get("id"),
            moment=_parse_moment(data.get("moment")),
            concept_name=data.get("concept_name"),
            concept=ConceptRef.from_value(data.get("concept")),
            amount=_parse_money(data.get("amount")),
            commission=_parse_money(data.get("commission")),
            cashier=CashierRef.from_value(data.get("cashier")),
        )


@dataclass(frozen=True)
class ConfigSnapshot:
    """Business identity printed on every ticket."""

    legal_name: Optional[str] = None
    business_name: Optional[str] = None
    address: Optional[str] = None
    announcement: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConfigSnapshot":
        return cls(
            legal_name=data.get("legal_name"),
            business_name=data.get("business_name"),
            address=data.get("address"),
            announcement=data.get("announcement"),
        )
