import pytest

import player
from race import Race
from simulation import Simulation
from snake import Snake


def test_defaults():
    args = player.parse_args([])
    assert args.app == 'snake'
    assert args.ui == 'terminal'
    assert args.seed is None


def test_app_and_ui_positionals():
    args = player.parse_args(['particles', 'debug', '--seed', '3', '--log-level', 'DEBUG'])
    assert (args.app, args.ui, args.seed, args.log_level) == ('particles', 'debug', 3, 'DEBUG')


@pytest.mark.parametrize("argv", [['pong'], ['snake', 'web']])
def test_unknown_names_are_rejected(argv):
    with pytest.raises(SystemExit):
        player.parse_args(argv)


@pytest.mark.parametrize("name, cls", [('particles', Simulation), ('snake', Snake), ('race', Race)])
def test_create_app(name, cls):
    assert isinstance(player.create_app(name, seed=1), cls)


def test_every_app_has_a_frame_rate_and_graphics():
    for name in player.APPS:
        app = player.create_app(name, seed=0)
        assert app.frame_rate > 0
        assert app.graphics.grid.dimensions()
        app.run_frame()


def test_seed_makes_runs_reproducible():
    foods = [player.create_app('snake', seed=11).food for _ in range(2)]
    assert foods[0] == foods[1]
