"""
Monitoring run control.

Contains the sampling controller state machine, the console reporter and the
signal handling that turns SIGINT/SIGTERM into an early stop.
"""

from .controller import SamplingController
from .reporter import ConsoleReporter
from .signal_handler import SignalHandler

__all__ = [
    "SamplingController",
    "ConsoleReporter",
    "SignalHandler",
]
