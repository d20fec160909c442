"""Service layer wiring the domain to its collaborators.

- TimeFlowController: routes host events and player actions into the freeze
  verdict and rate scaler, writes the rewritten elapsed time back to the clock
- LoggingNotifier / RecordingNotifier: notifier implementations

Testing Usage:
    from timespeed.domain.clock import SimulatedClock
    from timespeed.services import RecordingNotifier, TimeFlowController

    notifier = RecordingNotifier()
    controller = TimeFlowController(SimulatedClock(), notifier=notifier)
    controller.toggle_freeze()
    assert notifier.messages == ["Time stopped."]
"""

from timespeed.services.notifier_service import LoggingNotifier, Notification, RecordingNotifier
from timespeed.services.time_flow_service import EVENT_STEPS, Step, TimeFlowController

__all__ = [
    "EVENT_STEPS",
    "LoggingNotifier",
    "Notification",
    "RecordingNotifier",
    "Step",
    "TimeFlowController",
]
