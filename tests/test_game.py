import pytest

from cub3d.game import Game
from cub3d.geometry import trgb
from cub3d.image import Image
from cub3d.raycast import Textures


def _tex(color):
    img = Image(32, 32)
    img.pixels = [color] * (32 * 32)
    return img


@pytest.fixture
def game():
    return Game(Textures(*(_tex(c) for c in range(1, 7))))


def test_initial_state(game):
    assert game.frame == -1
    assert game.floor_color == trgb(0, 108, 108, 108)
    assert game.ceiling_color == trgb(0, 0, 80, 80)


def test_render_draws_ceiling_and_floor(game):
    game.render()
    assert game.image.get_pixel(0, 0) == game.ceiling_color
    assert game.image.get_pixel(0, game.image.height - 1) == game.floor_color
    assert game.minimap.get_pixel(0, 0) == 0x00414E58


def test_tick_cycle(game, capsys):
    results = [game.tick() for _ in range(7)]
    assert results == [True, True, False, True, True, True, False]
    assert game.frame == -1
    assert capsys.readouterr().out == "4\n"