"""Configuration and input checks for curve bootstrapping."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from fincore.instruments.cashflows import Instrument
from fincore.schema.enums import BootstrapMethod
from fincore.utils.errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass
class BootstrapConfig:
    """Configuration for bootstrap process.

    Attributes:
        method: Root finder used for each pillar
        tolerance: Absolute tolerance on instrument present value
        max_iterations: Iteration budget per pillar
        seed_step: Offset of the second secant seed from the first
        initial_rate: Seed forward rate when the curve is empty
            (the synthetic origin rate 0 is used otherwise)
        verbose: Log each solved pillar at INFO level
    """

    method: BootstrapMethod = BootstrapMethod.SECANT
    tolerance: float = 1e-10
    max_iterations: int = 100
    seed_step: float = 1e-3
    initial_rate: Optional[float] = None
    verbose: bool = False


class InstrumentProcessor:
    """Utility class for validating instruments before bootstrap."""

    @staticmethod
    def validate_instrument(instrument: Instrument, t_last: float, index: int = 0) -> None:
        """
        Check that an instrument can add a pillar past t_last.

        Args:
            instrument: Instrument to bootstrap
            t_last: Last time on the curve built so far
            index: Position of the instrument in the input, for messages

        Raises:
            InvalidInputError: If the instrument is empty or ends on or before t_last
        """
        if instrument.is_empty:
            raise InvalidInputError(f"Instrument {index}: cash flows are empty")

        u_last, _ = instrument.back()
        if not u_last > t_last:
            raise InvalidInputError(
                f"Instrument {index}: last cash flow at {u_last} must be past end of curve {t_last}"
            )

    @staticmethod
    def check_maturity_order(instruments: Sequence[Instrument]) -> bool:
        """
        Return True if final maturities strictly increase.

        Instruments are never re-sorted; an out-of-order input is logged so the
        failure raised later is easier to trace.
        """
        maturities = [i.back()[0] for i in instruments if not i.is_empty]
        ordered = all(a < b for a, b in zip(maturities, maturities[1:]))
        if not ordered:
            logger.warning("Instrument maturities are not increasing: %s", maturities)
        return ordered
