import asyncio
import logging
from typing import Callable, Optional

from junction.kernel.signal_controller import SignalController

logger = logging.getLogger(__name__)

class ToggleDriver:
    """Single-button control: first activation starts, second one ends the run."""

    def __init__(self, controller: SignalController, on_start: Optional[Callable[[], None]] = None):
        self.controller = controller
        self.on_start = on_start
        self.running = False
        self.finished = asyncio.Event()

    def toggle(self):
        if self.finished.is_set():
            return
        if not self.running:
            if self.on_start:
                self.on_start()
            self.controller.start()
            self.running = True
        else:
            self.finish()

    def finish(self):
        self.controller.stop()
        self.running = False
        if not self.finished.is_set():
            self.finished.set()
            logger.info("Driver finished")

    async def wait(self):
        await self.finished.wait()
