"""Keyboard and mouse handling: turning, walking with collisions, doors."""

from __future__ import annotations

import math
from enum import IntEnum

from .geometry import CELLSIZE, DRAD, PI, RES_X, Player, Vec, limit_angle
from .world import Cell

TURN_STEP = 0.1
MOUSE_DEAD_ZONE = 90
_AXIS_EPS = 0.001


class Key(IntEnum):
    """The keys the game reacts to, by X11 keysym."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    RIGHT = 0xFF53
    A = 0x61
    D = 0x64
    E = 0x65
    S = 0x73
    W = 0x77


def _ray_cell(player: Player, d: Vec) -> tuple[int, int]:
    a = player.angle
    cx = (player.pos.x + d.x) / CELLSIZE
    cy = (player.pos.y + d.y) / CELLSIZE
    cell = (cx, cy)
    if not (PI / 4 <= a <= 7 * PI / 4):
        cell = (cx + 1, cy)
    if PI / 4 <= a <= 3 * PI / 4:
        cell = (cx, cy + 1)
    if 3 * PI / 4 <= a <= 5 * PI / 4:
        cell = (cx - 1, cy)
    if 5 * PI / 4 <= a <= 7 * PI / 4:
        cell = (cx, cy - 1)
    return int(cell[0]), int(cell[1])


def toggle_door(player: Player, grid) -> bool:
    """Open or close the first door in front of the player; report a change."""
    angle = limit_angle(player.angle - DRAD * 30)
    own = (int(player.pos.x / CELLSIZE), int(player.pos.y / CELLSIZE))
    for _ in range(120):
        d = Vec(math.cos(angle) * 15, math.sin(angle) * 15)
        x, y = _ray_cell(player, d)
        if grid[y][x] == Cell.DOOR:
            grid[y][x] = Cell.OPEN_DOOR
            return True
        if grid[y][x] == Cell.OPEN_DOOR and own != (x, y):
            grid[y][x] = Cell.DOOR
            return True
        angle = limit_angle(angle + DRAD / 2)
    return False


def _near(a: float, target: float) -> bool:
    return target - _AXIS_EPS <= a <= target + _AXIS_EPS


def _move_straight(player: Player, grid, d: Vec) -> None:
    pos, a = player.pos, player.angle
    off = Vec(-15 if d.x < 0 else 15, -15 if d.y < 0 else 15)
    add = Vec((pos.x + d.x + 15) / CELLSIZE, (pos.y + d.y + 15) / CELLSIZE)
    sub = Vec((pos.x + d.x - 15) / CELLSIZE, (pos.y - d.y - 15) / CELLSIZE)
    end = Vec((pos.x + d.x + off.x) / CELLSIZE, (pos.y + d.y + off.y) / CELLSIZE)
    if _near(a, PI) or _near(a, 0):
        if grid[int(add.y)][int(end.x)] <= 0 and grid[int(sub.y)][int(end.x)] <= 0:
            pos.x += d.x
            return
    if _near(a, PI / 2) or _near(a, 3 * PI / 2):
        if grid[int(end.y)][int(add.x)] <= 0 and grid[int(end.y)][int(sub.x)] <= 0:
            pos.y += d.y


def move_player(player: Player, grid, delta: Vec) -> None:
    """Move by ``delta``, sliding along walls instead of entering them."""
    a = player.angle
    if _near(a, PI) or _near(a, 0) or _near(a, PI / 2) or _near(a, 3 * PI / 2):
        _move_straight(player, grid, delta)
        return
    pos = player.pos
    end = pos + delta
    ox = -18 if delta.x < 0 else 18
    oy = -18 if delta.y < 0 else 18
    if grid[int(end.y) // CELLSIZE][int((end.x + ox) / CELLSIZE)] <= 0:
        pos.x += delta.x
    if grid[int(end.y + oy) // CELLSIZE][int(end.x) // CELLSIZE] <= 0:
        pos.y += delta.y


def handle_wasd(key: Key, player: Player, grid) -> None:
    """Walk forward/back with W/S, strafe with A/D."""
    if key in (Key.W, Key.S):
        d = player.delta
        step = Vec(d.x, d.y) if key == Key.W else Vec(-d.x, -d.y)
        move_player(player, grid, step)
        return
    saved = player.angle
    player.angle = limit_angle(player.angle + PI / 2)
    if key == Key.A:
        player.angle = limit_angle(player.angle - PI)
    step = Vec(math.cos(player.angle) * 5, math.sin(player.angle) * 5)
    move_player(player, grid, step)
    player.angle = saved


def handle_key(key: int, player: Player, grid) -> bool:
    """React to a key press; return False when the game should quit."""
    if key == Key.ESCAPE:
        return False
    if key in (Key.W, Key.A, Key.S, Key.D):
        handle_wasd(Key(key), player, grid)
    elif key in (Key.LEFT, Key.RIGHT):
        player.rotate(TURN_STEP)
        if key == Key.LEFT:
            player.rotate(-2 * TURN_STEP)
    elif key == Key.E:
        toggle_door(player, grid)
    return True


def handle_mouse(x: int, player: Player, grid) -> bool:
    """Turn when the pointer strays far enough from the window centre."""
    offset = RES_X // 2 - x
    if offset < -MOUSE_DEAD_ZONE:
        return handle_key(Key.RIGHT, player, grid)
    if offset > MOUSE_DEAD_ZONE:
        return handle_key(Key.LEFT, player, grid)
    return True