"""Protocol-based interfaces for the controller's collaborators.

The controller consumes a clock source and a policy provider and produces to a
notifier.  Hosts supply their own implementations; the package ships
in-memory ones for tests and the HTTP host.
"""

from timespeed.interfaces.clock import IClockSource
from timespeed.interfaces.notifier import INotifier
from timespeed.interfaces.policy import IPolicyProvider

__all__ = [
    "IClockSource",
    "INotifier",
    "IPolicyProvider",
]
