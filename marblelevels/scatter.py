"""Levels whose marbles are placed at scattered fixed points or grids."""

from __future__ import annotations

import math

from marblelevels.script import PI, LevelScript


def moon_level() -> str:
    """Return the moon level script."""
    corner = 1 / 2**0.5

    script = LevelScript()
    script.line("$board 1").line()
    script.line("$quit_on_death true").line()

    script.place("blue", -0.5, 0, player=True)
    script.place("blue", 0.5, 0)

    for color, (x, y) in (
        ("red", (0.5, -0.333333)),
        ("red", (0.5 + 0.1, 0.333333)),
        ("red", (0.5 - 0.1, 0.333333)),
        ("red", (-0.5, 0.333333)),
        ("red", (-0.5 + 0.1, -0.333333)),
        ("red", (-0.5 - 0.1, -0.333333)),
        ("yellow", (0.5, 0.666666)),
        ("yellow", (0.5 + 0.1, -0.666666)),
        ("yellow", (0.5 - 0.1, -0.666666)),
        ("yellow", (-0.5, -0.666666)),
        ("yellow", (-0.5 + 0.1, 0.666666)),
        ("yellow", (-0.5 - 0.1, 0.666666)),
        ("red", (0, 0)),
    ):
        script.place(color, x, y)

    for quarter in (0.25, 0.75, 1.25, 1.75):
        script.place_polar("red", 1, PI * quarter + 0.05)
        script.place_polar("red", 1, PI * quarter - 0.05)

    script.place("red", 0, 1)
    script.place("red", 0, -1)

    for x, y in ((corner, corner), (corner, -corner), (-corner, corner), (-corner, -corner)):
        script.place("yellow", x, y)

    script.line()
    script.line("$score red == 0 min |Eliminate Red: ")
    script.line("$score yellow == 0 min |Eliminate Yellow: ")
    return script.text()


def nebula_level() -> str:
    """Return the nebula level script: a grid inscribed in the board."""
    # The side of a square inscribed in a circle of radius 1.
    dimension = 2**0.5
    width = 7
    height = 7

    script = LevelScript()
    script.line("$board 10").line()
    script.line("$collision k n 1").line("$collision w k 1").line()
    script.place("white", 1, 0)
    script.line()

    for w in range(-(width // 2), width // 2 + 1):
        for h in range(-(height // 2), height // 2 + 1):
            x = dimension * float(w) / width
            y = dimension * float(h) / height
            if w == 0 and h == 0:
                script.place("brown", x, y, player=True)
            else:
                script.place("black", x, y)

    script.line()
    script.line("$score black <= 42 min |Survive to 6 Black Eliminated: ")
    script.line("$score black <= 36 min |Survive to one quarter Black Eliminated: ")
    script.line("$score black <= 24 min |Survive to half of the Black Eliminated: ")
    script.line(
        "$score black <= 12 min |Survive to three quarters of the Black Eliminated: "
    )
    script.line("$score black == 0 min |Survive to All Black Eliminated: ")
    return script.text()


def _parabola_pairs(script: LevelScript, color: str, count: float, width: float,
                    slope: float, offset: float) -> None:
    half = math.floor(count / 2)
    for i in range(-half, math.ceil(count / 2)):
        x = (i / half) * width
        y = slope * (x * x) + offset
        script.place(color, x, y)
        script.place(color, x, -y)


def pandemonium_level() -> str:
    """Return the Pandemonium level script."""
    script = LevelScript()
    script.line("$board 11").line()
    script.line("$quit_on_death true").line()
    script.place("blue", 0, 0, player=True)

    _parabola_pairs(script, "black", 3, 0.0625, -10, 0.1)
    _parabola_pairs(script, "red", 7, 0.75, -0.5, 0.333333)

    script.line()
    return script.text()