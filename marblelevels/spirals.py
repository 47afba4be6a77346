"""Levels whose marbles are laid out along spirals."""

from __future__ import annotations

import math

from marblelevels.script import PI, LevelScript

# Each colour code collides with the listed partners, one block per code.
_CUSTOM_COLLISION_BLOCKS = (
    ("k", "k"),
    ("w", "kw"),
    ("r", "kwr"),
    ("y", "kwry"),
    ("b", "wkryb"),
    ("o", "kwrybo"),
    ("g", "kwrybog"),
    ("p", "kwrybogp"),
    ("a", "kwrybogpa"),
    ("n", "kwrybogpan"),
)

_SHELL_HEADER = (
    "If you want to add a player to this level, simply paste the below into "
    "the custom level, and add one.",
    "",
    "$board 6",
    "",
    "$alignment_weight orange 2",
    "",
    "$behavior brown brown 3",
    "$cohesion_range brown 100",
    "$alignment_range brown 100",
    "$alignment_weight brown 2",
    "$separation_range brown 6",
    "$flee_range brown 13",
    "$attack_range brown 5",
    "",
    "$behavior yellow white 0",
    "$behavior yellow orange 0",
    "$behavior yellow red 1",
    "$behavior yellow brown 2",
    "$behavior yellow black 2",
    "",
    "$behavior orange white 3",
    "$behavior orange yellow 3",
    "$behavior orange red 2",
    "$behavior orange brown 1",
    "$behavior orange black 2",
    "",
    "$behavior red white 2",
    "$behavior red yellow 2",
    "$behavior red orange 1",
    "$behavior red brown 0",
    "$behavior red black 0",
    "",
    "$behavior brown white 2",
    "$behavior brown yellow 1",
    "$behavior brown orange 2",
    "$behavior brown red 3",
    "$behavior brown black 3",
    "",
    "$collision white black 3 $quit",
    "",
    "$collision white yellow 0",
    "$collision white orange 0",
    "$collision white red 1 orange",
    "$collision white brown 1 yellow",
    "",
    "$collision black yellow 1 brown",
    "$collision black orange 1 red",
    "$collision black red 0",
    "$collision black brown 0",
    "",
    "$collision yellow orange 0",
    "$collision yellow red 1 orange",
    "$collision orange brown 1 yellow",
    "$collision red brown 0",
    "$collision red orange 1 red",
    "$collision brown yellow 1 brown",
    "",
)


def custom_level() -> str:
    """Return the default custom level script: a golden-angle spiral."""
    palette = ("red", "yellow", "blue", "red", "green", "purple", "orange", "green")
    turn_frac = (1 + 5**0.5) / 2
    # Two Fibonacci numbers, one apart, one of which is the number of arms.
    count = 8 * 21
    bands = len(palette)

    script = LevelScript()
    script.line("$board 0").line()
    script.line("$label 0 0 0 |Custom\\nLevel").line()
    script.line("$delay 10 $quit").line()
    for code, partners in _CUSTOM_COLLISION_BLOCKS:
        for partner in partners:
            script.line(f"$collision {code} {partner} 0")
        script.line()

    for i in range(count):
        radius = (i / (count - 1.0)) ** 0.5
        angle = 2 * PI * turn_frac * i
        band = i * bands // count
        # Black inner ring, gray middle ring, white outer ring, coloured arms between.
        if band == 0:
            if i == 0:
                script.place("black", 0, 0, player=True)
            else:
                script.place_polar("black", radius, angle)
        elif band == bands // 2 - 1:
            script.place_polar("gray", radius, angle)
        elif band == bands - 1:
            script.place_polar("white", radius, angle)
        else:
            script.place_polar(palette[i % bands], radius, angle)

    script.line()
    return script.text()


def redeye_level() -> str:
    """Return the Red Eye level script."""
    points_per_revolution = 9
    revolutions = 3
    total = revolutions * points_per_revolution

    script = LevelScript()
    script.line("$board 4").line()
    script.line("$quit_on_death true").line()
    script.place("blue", 0, 0, player=True)
    script.line("$place yellow -0.05 0")
    script.line("$place yellow 0 0.05")
    script.line("$place yellow 0.05 0")

    for i in range(total):
        revolution = i // points_per_revolution
        direction = 1 if revolution % 2 else -1
        radius = i / total
        angle = 2 * PI * (i % points_per_revolution) / points_per_revolution * direction
        if i > 2:
            script.place_polar("red", radius, angle)

    script.line("$score red == 0 min |Eliminate Red: ")
    script.line("$score yellow == 0 min |Eliminate Yellow: ")
    script.line("$score yellow == 0 max |Survive without Yellow: ")
    return script.text()


def shell_level() -> str:
    """Return the shell level script."""
    palette = ("yellow", "orange", "red", "brown")
    points_per_revolution = 9
    revolutions = 4
    total = revolutions * points_per_revolution

    script = LevelScript()
    for text in _SHELL_HEADER:
        script.line(text)

    script.line("$place white 0 0")
    for i in range(1, total):
        revolution = (i - 1) // points_per_revolution
        radius = i / total
        angle = 2 * PI * -(i % points_per_revolution) / points_per_revolution - PI / 2
        script.place_polar(palette[revolution], radius, angle)
    script.line("$place black 0 -1").line().line()
    return script.text()


def whirlpool_level() -> str:
    """Return the whirlpool level script."""
    palette = ("blue", "blue", "yellow", "red", "yellow")
    turn_frac = 0.903
    count = 60
    vertical_offset = 0.25

    script = LevelScript()
    script.line("$board 2").line()
    script.line("$highlight_player true").line()
    script.line("$vampiric_player true").line()
    script.place("blue", 0, vertical_offset, player=True)

    for i in range(1, count):
        radius = (1 + vertical_offset) * i / (count - 1.0)
        angle = 2 * PI * turn_frac * i
        x = math.cos(angle) * radius
        y = vertical_offset + math.sin(angle) * radius
        # Keep only marbles that land inside the board's right-hand edge.
        if -1.0 <= y < 1.0 and x < math.cos(math.asin(y)):
            script.place(palette[i * len(palette) // count], x, y)

    script.line()
    script.line("$score red == 0 min |Eliminate Red: ")
    return script.text()