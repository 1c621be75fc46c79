"""Game state, the frame loop and the window."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .controls import Key, handle_key, handle_mouse
from .geometry import CELLSIZE, PI, RES_X, RES_Y, Player, Vec, trgb
from .image import Image
from .raycast import Textures, render_view
from .world import default_map, draw_minimap

MINIMAP_SIZE = 256
MINIMAP_OFFSET = (10, 10)


class Game:
    """Everything one running game holds."""

    def __init__(self, textures: Textures) -> None:
        self.textures = textures
        self.player = Player(Vec(4 * CELLSIZE, 4 * CELLSIZE), 3 * PI / 2)
        self.grid = default_map()
        self.floor_color = trgb(0, 108, 108, 108)
        self.ceiling_color = trgb(0, 0, 80, 80)
        self.image = Image(RES_X, RES_Y)
        self.minimap = Image(MINIMAP_SIZE, MINIMAP_SIZE)
        self.frame = -1

    def render(self) -> None:
        """Redraw the view and the minimap from scratch."""
        self.image = Image(RES_X, RES_Y)
        self.minimap = Image(MINIMAP_SIZE, MINIMAP_SIZE)
        draw_minimap(self.grid, self.minimap)
        render_view(self.image, self.minimap, self.player, self.grid,
                    self.textures, self.floor_color, self.ceiling_color)

    def tick(self) -> bool:
        """Advance the frame counter; return True if a new frame was drawn."""
        self.frame += 1
        if self.frame == 2:
            return False
        if self.frame == 6:
            print("4")
            self.frame = -1
            return False
        self.render()
        return True


def _load_texture(pygame, path: Path) -> Image:
    surface = pygame.image.load(str(path))
    width, height = surface.get_size()
    image = Image(width, height)
    image.pixels = [
        (c.r << 16) | (c.g << 8) | c.b
        for c in (surface.get_at((x, y)) for y in range(height) for x in range(width))
    ]
    return image


def _to_surface(pygame, image: Image):
    data = bytes(
        v for p in image.pixels for v in ((p >> 16) & 0xFF, (p >> 8) & 0xFF, p & 0xFF)
    )
    return pygame.image.frombuffer(data, (image.width, image.height), "RGB")


_PYGAME_KEYS = {
    "K_ESCAPE": Key.ESCAPE, "K_LEFT": Key.LEFT, "K_RIGHT": Key.RIGHT,
    "K_w": Key.W, "K_a": Key.A, "K_s": Key.S, "K_d": Key.D, "K_e": Key.E,
}


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="cub3d")
    parser.add_argument("--textures", default="textures", help="texture directory")
    options = parser.parse_args(argv)

    import pygame

    pygame.init()
    screen = pygame.display.set_mode((RES_X, RES_Y))
    pygame.display.set_caption("CUB3D")
    folder = Path(options.textures)
    names = {"north": "north.xpm", "south": "south.xpm", "east": "east.xpm",
             "west": "west.xpm", "door": "Tile_04.xpm", "door_open": "blank.xpm"}
    textures = Textures(**{k: _load_texture(pygame, folder / v) for k, v in names.items()})
    keys = {getattr(pygame, name): key for name, key in _PYGAME_KEYS.items()}
    pygame.key.set_repeat(100, 30)
    pygame.mouse.set_visible(False)
    centre = (RES_X // 2, RES_Y // 2)
    pygame.mouse.set_pos(centre)

    game = Game(textures)
    game.tick()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 1
                if event.type == pygame.KEYDOWN and event.key in keys:
                    key = keys[event.key]
                    if not handle_key(key, game.player, game.grid):
                        print(f"{int(key)} (ESC) key pressed")
                        return 0
                elif event.type == pygame.MOUSEMOTION and event.pos != centre:
                    pygame.mouse.set_pos(centre)
                    handle_mouse(event.pos[0], game.player, game.grid)
            if game.tick():
                screen.blit(_to_surface(pygame, game.image), (0, 0))
                screen.blit(_to_surface(pygame, game.minimap), MINIMAP_OFFSET)
                pygame.display.flip()
    finally:
        pygame.mouse.set_visible(True)
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())