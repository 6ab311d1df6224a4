import argparse
import time
from typing import List

from junction.application.presenter import ConsolePresenter
from junction.domain.models import SignalChange
from junction.kernel.scheduler import VirtualScheduler
from junction.kernel.signal_controller import SignalController

def run_headless_experiment(duration_s: float, standard_dwell: float = None,
                            caution_dwell: float = None) -> List[SignalChange]:
    """Fast-forward a controller on the virtual clock and collect every change."""
    scheduler = VirtualScheduler()
    controller = SignalController(standard_dwell, caution_dwell, scheduler=scheduler)
    changes: List[SignalChange] = []
    controller.on_change(changes.append)

    controller.start()
    scheduler.advance(duration_s * 1000)
    controller.stop()
    return changes

def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the junction controller on simulated time")
    parser.add_argument("duration", type=float, help="Simulated seconds to run")
    parser.add_argument("--standard-dwell", type=float, default=None)
    parser.add_argument("--caution-dwell", type=float, default=None)
    args = parser.parse_args(argv)

    start_time = time.time()
    changes = run_headless_experiment(args.duration, args.standard_dwell, args.caution_dwell)
    end_time = time.time()

    presenter = ConsolePresenter()
    presenter.header()
    for change in changes:
        presenter(change)
    print(f"{len(changes)} changes in {args.duration:g}s simulated, {end_time - start_time:.4f}s wall")

if __name__ == "__main__":
    main()
