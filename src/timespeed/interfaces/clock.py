"""Clock Source Protocol Interface.

This module defines the protocol (interface) for the external clock whose
elapsed-time counter the controller gates and rescales.
"""

from typing import Protocol

from timespeed.domain.models import Location


class IClockSource(Protocol):
    """Protocol defining the interface for the host clock.

    ``elapsed`` is the raw number of real milliseconds since the last
    ten-minute tick.  The controller reads it every world update and may
    write a rewritten value back.
    """

    elapsed: int

    def reference_interval(self, location: Location | None) -> int:
        """Return the unscaled real-time length of one tick at a location.

        Args:
            location: The location to query, or None before one is known

        Returns:
            Milliseconds per ten in-game minutes without any player scaling
        """
        ...
