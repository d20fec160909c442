"""Domain model for time-flow control.

This package holds everything that decides how the host clock moves:

* Enumerations for override state, freeze causes and host events
  (see :mod:`enums`).
* Value dataclasses flowing through the controller (see :mod:`models`).
* The configuration tree and the policy reading it (see :mod:`time_config`
  and :mod:`policy`).
* The two stateful components, :mod:`freeze` and :mod:`rate`.

Nothing here performs I/O; transitions are reported to observers instead.
"""

from . import (
    changes,
    clock,
    enums,
    freeze,
    messages,
    models,
    policy,
    rate,
    time_config,
)

__all__ = [
    "changes",
    "clock",
    "enums",
    "freeze",
    "messages",
    "models",
    "policy",
    "rate",
    "time_config",
]
