"""
Signal handling for a monitoring run.

SIGINT and SIGTERM are turned into a shutdown request on the active
``SamplingController`` so the run stops early but still reports statistics
and writes its outputs for the samples collected so far.
"""

import logging
import signal
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .controller import SamplingController

logger = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class SignalHandler:
    """
    Installs SIGINT/SIGTERM handlers for the lifetime of a run.

    Usable as a context manager; the original handlers are restored on exit.
    """

    def __init__(self, controller: "SamplingController"):
        self.controller = controller
        self._original_handlers = {}
        self._signal_handlers_set = False

    def setup_signal_handlers(self) -> None:
        """Route SIGINT/SIGTERM to the controller's shutdown request."""
        try:
            for signum in HANDLED_SIGNALS:
                self._original_handlers[signum] = signal.signal(signum, self._handle_signal)
            self._signal_handlers_set = True
            logger.debug("Signal handlers set up for SamplingController")
        except Exception as e:
            # signal.signal() only works in the main thread.
            logger.warning(f"Failed to set up signal handlers: {e}")

    def cleanup_signal_handlers(self) -> None:
        """Restore original signal handlers."""
        if not self._signal_handlers_set:
            return

        try:
            for signum, handler in self._original_handlers.items():
                if handler is not None:
                    signal.signal(signum, handler)
            logger.debug("Signal handlers restored")
        except Exception as e:
            logger.warning(f"Failed to restore signal handlers: {e}")
        finally:
            self._original_handlers = {}
            self._signal_handlers_set = False

    def _handle_signal(self, signum: int, frame: Any) -> None:
        if self.controller.shutdown_requested.is_set():
            logger.warning("Shutdown already in progress. Please be patient.")
            return
        logger.info(f"Signal {signal.strsignal(signum)} received. Stopping sampling...")
        self.controller.request_shutdown()

    def __enter__(self) -> "SignalHandler":
        self.setup_signal_handlers()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.cleanup_signal_handlers()
