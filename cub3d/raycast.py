"""Grid ray casting and the textured first-person view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .geometry import (
    CELLSIZE,
    DRAD,
    PI,
    RES_Y,
    Player,
    Vec,
    distance,
    limit_angle,
)
from .image import Image
from .world import Cell

MAX_STEPS = 8
RAY_COUNT = 240
COLUMN_WIDTH = 4
MINIMAP_RAY_COLOR = 0x00FFFFFF
_EPS = 0.0001


@dataclass
class Textures:
    """The wall, door and open-door images used by the renderer."""

    north: Image
    south: Image
    east: Image
    west: Image
    door: Image
    door_open: Image


@dataclass
class Ray:
    """One cast ray: both candidate hits, the chosen one and how to draw it."""

    hhit: Vec = field(default_factory=Vec)
    vhit: Vec = field(default_factory=Vec)
    hit: Vec = field(default_factory=Vec)
    hline: float = 0.0
    ty_off: float = 0.0
    ty_step: float = 0.0
    tx: int = 0
    tex: Image | None = None


def _neg_inv_tan(angle: float) -> float:
    t = math.tan(angle)
    return -1 / t if t != 0 else -math.inf


def _near_axis(angle: float) -> bool:
    return angle == 0 or (PI - _EPS < angle < PI + _EPS)


def _is_solid(grid, mx: float, my: float) -> bool:
    return grid[int(my)][int(mx)] >= 1


def _inside(grid, mx: float, my: float) -> bool:
    return 0 < mx < len(grid[0]) and 0 < my < len(grid)


def horizontal_hit(angle: float, pos: Vec, grid) -> Vec:
    """First wall met where the ray crosses horizontal grid lines."""
    cot = _neg_inv_tan(angle)
    if angle > PI:
        ry = (int(pos.y) // CELLSIZE) * CELLSIZE - _EPS
        off = Vec(CELLSIZE * cot, -CELLSIZE)
    else:
        ry = (int(pos.y) // CELLSIZE) * CELLSIZE + CELLSIZE
        off = Vec(-CELLSIZE * cot, CELLSIZE)
    r = Vec((pos.y - ry) * cot + pos.x, ry)
    if _near_axis(angle):
        r = Vec(pos.x, pos.y)
    for _ in range(MAX_STEPS):
        mx, my = r.x / CELLSIZE, r.y / CELLSIZE
        if _inside(grid, mx, my) and _is_solid(grid, mx, my):
            return r
        r = r + off
    return r


def vertical_hit(angle: float, pos: Vec, grid) -> Vec:
    """First wall met where the ray crosses vertical grid lines."""
    ntan = -math.tan(angle)
    if PI / 2 < angle < 3 * PI / 2:
        rx = (int(pos.x) // CELLSIZE) * CELLSIZE - _EPS
        off = Vec(-CELLSIZE, CELLSIZE * ntan)
    else:
        rx = (int(pos.x) // CELLSIZE) * CELLSIZE + CELLSIZE
        off = Vec(CELLSIZE, -CELLSIZE * ntan)
    r = Vec(rx, (pos.x - rx) * ntan + pos.y)
    if _near_axis(angle):
        r = Vec(pos.x - (math.floor(pos.x + 0.5) % CELLSIZE), pos.y)
    for _ in range(MAX_STEPS):
        mx, my = r.x / CELLSIZE, r.y / CELLSIZE
        if _inside(grid, mx, my):
            if int(r.x) % CELLSIZE == 0 and off.x < 0:
                mx -= 1
            if _is_solid(grid, mx, my):
                return r
        r = r + off
    return r


def cast_ray(angle: float, player: Player, grid) -> Ray:
    """Cast one ray and work out the projected wall height and texture step."""
    ray = Ray()
    ray.hhit = horizontal_hit(angle, player.pos, grid)
    ray.vhit = vertical_hit(angle, player.pos, grid)
    ray.hit = Vec(ray.vhit.x, ray.vhit.y)
    if distance(player.pos, ray.hhit) < distance(player.pos, ray.vhit):
        ray.hit = Vec(ray.hhit.x, ray.hhit.y)
    denom = distance(ray.hit, player.pos) * math.cos(limit_angle(player.angle - angle))
    if denom <= 0 or not math.isfinite(denom):
        hline = float(RES_Y) if denom <= 0 else 0.0
    else:
        hline = float(math.floor(CELLSIZE * RES_Y / denom + 0.5))
    ray.hline = hline
    ray.ty_step = 32 / hline if hline else 0.0
    ray.ty_off = 0.0
    if hline >= RES_Y:
        ray.ty_off = (hline - RES_Y) / 2
        ray.hline = float(RES_Y)
    return ray


def _cell(grid, x: int, y: int):
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def select_texture(ray: Ray, angle: float, player: Player, grid, textures: Textures) -> None:
    """Choose the texture and texture column for the wall the ray hit."""
    rx = int(ray.hit.x / CELLSIZE) if math.isfinite(ray.hit.x) else -1
    ry = int(ray.hit.y / CELLSIZE) if math.isfinite(ray.hit.y) else -1
    if PI - _EPS <= angle <= PI + _EPS:
        rx -= 1
    hx = int(ray.hit.x) if math.isfinite(ray.hit.x) else 0
    hy = int(ray.hit.y) if math.isfinite(ray.hit.y) else 0

    def pick(plain: Image, nx: int, ny: int) -> Image:
        return textures.door_open if _cell(grid, nx, ny) == Cell.OPEN_DOOR else plain

    ray.tex = pick(textures.east, rx - 1, ry)
    ray.tx = hy // 2 % 32
    if PI / 2 <= angle <= 3 * PI / 2:
        ray.tex = pick(textures.west, rx + 1, ry)
        ray.tx = 31 - hy // 2 % 32
    if distance(ray.hit, player.pos) == distance(ray.hhit, player.pos):
        ray.tex = pick(textures.north, rx, ry + 1)
        ray.tx = hx // 2 % 32
        if 0 <= angle <= PI:
            ray.tex = pick(textures.south, rx, ry - 1)
            ray.tx = 31 - hx // 2 % 32
    if _cell(grid, rx, ry) == Cell.DOOR:
        ray.tex = textures.door


def _draw_textured(image: Image, x: int, top: float, ray: Ray) -> None:
    tex = ray.tex
    ty = ray.ty_off * ray.ty_step
    tx = min(max(ray.tx, 0), tex.width - 1)
    y = int(top)
    while y < top + ray.hline:
        y += 1
        row = min(max(int(ty), 0), tex.height - 1)
        image.put_pixel(x, y, tex.pixels[row * tex.width + tx])
        ty += ray.ty_step


def _draw_column(image: Image, index: int, ray: Ray, floor_color: int, ceiling_color: int) -> None:
    lineoff = RES_Y // 2 - (int(ray.hline) >> 1)
    for j in range(COLUMN_WIDTH):
        x = index * COLUMN_WIDTH + j
        image.draw_straight(Vec(x, 0), Vec(x, lineoff), ceiling_color)
        _draw_textured(image, x, lineoff, ray)
        image.draw_straight(Vec(x, ray.hline + lineoff), Vec(x, RES_Y), floor_color)


def render_view(image: Image, minimap: Image, player: Player, grid, textures: Textures,
                floor_color: int, ceiling_color: int) -> None:
    """Draw the 3D view into ``image`` and the ray fan onto ``minimap``."""
    angle = limit_angle(player.angle - DRAD * 30)
    origin = Vec(player.pos.x / 2, player.pos.y / 2)
    for index in range(RAY_COUNT):
        ray = cast_ray(angle, player, grid)
        end = Vec(ray.hit.x / 2, ray.hit.y / 2)
        if math.isfinite(end.x) and math.isfinite(end.y):
            minimap.draw_line(origin, end, MINIMAP_RAY_COLOR)
        select_texture(ray, angle, player, grid, textures)
        _draw_column(image, index, ray, floor_color, ceiling_color)
        angle = limit_angle(angle + DRAD / 4)