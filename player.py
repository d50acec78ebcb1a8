import argparse
import logging
import random

import constants
import logger_setup
from conway import Conway
from noise import Noise
from race import Race
from simulation import Simulation
from snake import Snake
from tetris import Tetris

logger = logging.getLogger(constants.LOGGER_NAME)

APPS = {
    'conway': Conway,
    'noise': Noise,
    'snake': Snake,
    'tetris': Tetris,
    'particles': Simulation,
    'race': Race,
}

UIS = ['terminal', 'window', 'debug']


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grid-based mini-games.")
    parser.add_argument('app', nargs='?', default='snake', choices=sorted(APPS),
                        help="Game to run (default: snake)")
    parser.add_argument('ui', nargs='?', default='terminal', choices=UIS,
                        help="Front end to run it in (default: terminal)")
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for every random choice the game makes")
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--log-file', default=None,
                        help="Also write log lines to this file")
    return parser.parse_args(argv)


def create_app(name, seed=None):
    """Instantiate the named game with its own seeded random source."""
    return APPS[name](rng=random.Random(seed))


def run(app, ui):
    if ui == 'window':
        from ui import window
        window.run_main_loop(app)
    elif ui == 'debug':
        from ui import debug
        debug.run_main_loop(app)
    else:
        from ui import terminal
        terminal.run_main_loop(app, constants.TERMINAL_CELL_WIDTH)


def main(argv=None):
    args = parse_args(argv)
    # curses owns the terminal, so log lines only go to the file there
    logger_setup.setup_logging(args.log_level, args.log_file, console=args.ui != 'terminal')
    logger.info(f"Starting {args.app} in the {args.ui} UI (seed {args.seed})")
    app = create_app(args.app, args.seed)
    run(app, args.ui)


if __name__ == '__main__':
    main()
