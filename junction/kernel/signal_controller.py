import logging
from typing import Callable, List, Optional

from pydantic import ValidationError

from junction.domain.errors import InvalidConfiguration
from junction.domain.models import Colours, ControllerStatus, DwellConfig, SignalChange
from junction.domain.phases import INITIAL_PHASE, Phase
from junction.kernel.scheduler import AsyncioScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)

Handler = Callable[[SignalChange], None]

class SignalController:
    """Drives a two-axis junction through P1 -> P2 -> P3 -> P4 -> P1 forever.

    Dwells are given in milliseconds; ``elapsed_time`` is reported in seconds,
    measured on the scheduler clock from the first ``start()``, unrounded.

    Construction never notifies. The first ``start()`` posts the P1 event at
    elapsed time 0 on the next scheduler tick, so handlers registered any time
    before that tick still receive it. Afterwards each transition runs as one
    timer callback: advance the phase, notify every handler, arm the next
    timer. Exactly one timer is pending while running; ``stop()`` cancels it.
    Without ``stop()`` the cycle keeps firing even when every handler has
    been removed.
    """

    def __init__(self, standard_dwell: Optional[float] = None, caution_dwell: Optional[float] = None,
                 scheduler: Optional[Scheduler] = None):
        values = {}
        if standard_dwell is not None:
            values["standardDwell"] = standard_dwell
        if caution_dwell is not None:
            values["cautionDwell"] = caution_dwell
        try:
            self.config = DwellConfig(**values)
        except ValidationError as e:
            raise InvalidConfiguration(f"Dwell durations must be positive numbers: {e}") from e

        self.scheduler = scheduler or AsyncioScheduler()
        self._phase = INITIAL_PHASE
        self._elapsed_time = 0.0
        self._start_ms: Optional[float] = None
        self._handlers: List[Handler] = []
        self._pending: Optional[TimerHandle] = None
        self._last_change: Optional[SignalChange] = None
        self._announced = False

    @property
    def standard_dwell(self) -> float:
        return self.config.standardDwell

    @property
    def caution_dwell(self) -> float:
        return self.config.cautionDwell

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def colours(self) -> Colours:
        return self._phase.colours

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def running(self) -> bool:
        return self._pending is not None

    # Subscription

    def on_change(self, handler: Handler) -> Handler:
        self._handlers.append(handler)
        return handler

    def off_change(self, handler: Handler):
        if handler in self._handlers:
            self._handlers.remove(handler)

    # Lifecycle

    def start(self):
        if self.running:
            logger.warning("start() ignored: controller already running in %s", self._phase.value)
            return

        if self._start_ms is None:
            self._start_ms = self.scheduler.now_ms()
            logger.info("Controller started (standard=%sms, caution=%sms)",
                        self.standard_dwell, self.caution_dwell)

        if not self._announced:
            self._pending = self.scheduler.call_soon(self._announce)
        else:
            logger.info("Controller resumed in %s at %.3fs", self._phase.value, self._elapsed_time)
            self._arm()

    def stop(self):
        if self._pending is None:
            return
        self._pending.cancel()
        self._pending = None
        logger.info("Controller stopped in %s at %.3fs", self._phase.value, self._elapsed_time)

    def status(self) -> ControllerStatus:
        return ControllerStatus(
            phase=self._phase.value,
            colours=self.colours,
            elapsedTime=self._elapsed_time,
            running=self.running,
            standardDwell=self.standard_dwell,
            cautionDwell=self.caution_dwell,
            lastChange=self._last_change,
        )

    # Timer callbacks

    def _announce(self):
        handle = self._pending
        self._announced = True
        self._notify()
        self._rearm(handle)

    def _transition(self):
        handle = self._pending
        self._elapsed_time = (self.scheduler.now_ms() - self._start_ms) / 1000
        self._phase = self._phase.successor()
        logger.debug("Transition to %s at %.3fs", self._phase.value, self._elapsed_time)
        self._notify()
        self._rearm(handle)

    def _rearm(self, handle: Optional[TimerHandle]):
        # A handler may have stopped (or stopped and restarted) the controller
        if self._pending is handle:
            self._arm()

    def _arm(self):
        dwell = self.config.for_kind(self._phase.dwell_kind)
        self._pending = self.scheduler.call_later(dwell, self._transition)

    def _notify(self):
        event = SignalChange(elapsedTime=self._elapsed_time, colours=self.colours)
        self._last_change = event
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Change handler %r failed", handler)
