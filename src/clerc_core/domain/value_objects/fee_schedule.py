from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from clerc_core.domain.exceptions import InvalidInputError

HUNDRED = Decimal(100)


@dataclass(frozen=True, slots=True)
class FeeSchedule:
    """Platform fee retained on a charge routed to a connected account.

    The fee for an amount (in minor currency units) is
    ``base_cents + amount * percent / 100``, rounded half-up to a whole
    minor unit.
    """

    base_cents: Decimal
    percent: Decimal

    def __post_init__(self) -> None:
        for name in ("base_cents", "percent"):
            value = to_decimal(getattr(self, name), name)
            if value < 0:
                raise InvalidInputError(f"{name} cannot be negative, got {value}", (name,))
            object.__setattr__(self, name, value)

    @classmethod
    def fixed(cls, fee_cents: int) -> FeeSchedule:
        """A flat fee that does not depend on the charge amount."""
        return cls(base_cents=Decimal(fee_cents), percent=Decimal(0))

    def fee_for(self, amount: int) -> int:
        fee = self.base_cents + Decimal(amount) * self.percent / HUNDRED
        return int(fee.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_decimal(value: object, name: str = "value") -> Decimal:
    """Coerce a persisted or configured number to Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidInputError(f"{name} must be a number, got {value!r}", (name,))
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}", (name,)) from e
