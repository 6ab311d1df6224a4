import sys
from typing import Optional, TextIO

from junction.domain.models import SignalChange

BANNER = (
    "-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=\n"
    "               \x1b[31mTraffic \x1b[33mLight \x1b[32mController\n"
    "       \x1b[0mPress Enter to start and stop the controller\n"
    "\x1b[0m-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=\n"
)
HEADER = "Time\tA - B Lights"

def format_time(seconds: float) -> str:
    """Format elapsed seconds as H:MM:SS, or M:SS below one hour."""
    total = int(seconds)
    h, rest = divmod(total, 3600)
    m, s = divmod(rest, 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"

def format_change(change: SignalChange) -> str:
    return f"{format_time(change.elapsedTime)}\t{change.colours.axisA.value} - {change.colours.axisB.value}"

class ConsolePresenter:
    def __init__(self, out: Optional[TextIO] = None):
        self.out = out or sys.stdout

    def banner(self):
        print(BANNER, file=self.out)

    def header(self):
        print(HEADER, file=self.out)

    def __call__(self, change: SignalChange):
        print(format_change(change), file=self.out, flush=True)
