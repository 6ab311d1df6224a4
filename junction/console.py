import argparse
import asyncio
import sys

from junction.application.driver import ToggleDriver
from junction.application.presenter import ConsolePresenter
from junction.domain import config
from junction.domain.errors import InvalidConfiguration
from junction.kernel.signal_controller import SignalController
from junction.utils.logger import setup_logging

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-phase junction signal controller")
    parser.add_argument("--standard-dwell", type=float, default=None,
                        help=f"Go phase dwell in ms (default {config.DEFAULT_STANDARD_DWELL_MS:g})")
    parser.add_argument("--caution-dwell", type=float, default=None,
                        help=f"Caution phase dwell in ms (default {config.DEFAULT_CAUTION_DWELL_MS:g})")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help="Logging level (default %(default)s)")
    return parser

async def run(controller: SignalController, presenter: ConsolePresenter):
    controller.on_change(presenter)
    driver = ToggleDriver(controller, on_start=presenter.header)

    loop = asyncio.get_running_loop()

    def on_input():
        if sys.stdin.readline():
            driver.toggle()
        else:
            driver.finish()

    loop.add_reader(sys.stdin.fileno(), on_input)
    try:
        await driver.wait()
    finally:
        loop.remove_reader(sys.stdin.fileno())

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        controller = SignalController(args.standard_dwell, args.caution_dwell)
    except InvalidConfiguration as e:
        parser.error(str(e))
    setup_logging(args.log_level)

    presenter = ConsolePresenter()
    presenter.banner()
    try:
        asyncio.run(run(controller, presenter))
    except PermissionError:
        # add_reader refuses regular files
        parser.error("stdin must be a terminal or a pipe")
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    main()
