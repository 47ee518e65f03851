"""Cash flow sequences used to describe fixed income instruments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from fincore.utils.errors import InvalidInputError, check_same_length

CashFlow = Tuple[float, float]


@dataclass(frozen=True)
class Instrument:
    """Ordered (time, amount) cash flows.

    Times are in years. Generic instruments are not required to be
    time-ascending; the constructors in :mod:`fincore.instruments.fixed_income`
    always are.
    """

    cash_flows: Tuple[CashFlow, ...] = ()

    def __post_init__(self) -> None:
        flows = tuple((float(u), float(c)) for u, c in self.cash_flows)
        object.__setattr__(self, "cash_flows", flows)

    @classmethod
    def from_arrays(cls, times: Sequence[float], amounts: Sequence[float]) -> "Instrument":
        """Build an instrument from parallel arrays of times and amounts."""
        check_same_length(("times", times), ("amounts", amounts))
        return cls(tuple(zip(times, amounts)))

    @classmethod
    def from_flows(cls, flows: Iterable[CashFlow]) -> "Instrument":
        return cls(tuple(flows))

    def __len__(self) -> int:
        return len(self.cash_flows)

    def __iter__(self) -> Iterator[CashFlow]:
        return iter(self.cash_flows)

    def __getitem__(self, index: int) -> CashFlow:
        return self.cash_flows[index]

    @property
    def is_empty(self) -> bool:
        return not self.cash_flows

    @property
    def times(self) -> Tuple[float, ...]:
        return tuple(u for u, _ in self.cash_flows)

    @property
    def amounts(self) -> Tuple[float, ...]:
        return tuple(c for _, c in self.cash_flows)

    def back(self) -> CashFlow:
        """Final cash flow."""
        if not self.cash_flows:
            raise InvalidInputError("Instrument cash flows are empty")
        return self.cash_flows[-1]

    def maturity(self) -> float:
        return self.back()[0]
