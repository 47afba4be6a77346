"""Building blocks for marble level scripts, plus the two fixed levels."""

from __future__ import annotations

from typing import Union

# The level generators use this truncated value of pi; keeping it preserves
# their exact output.
PI = 3.1415926535

Coordinate = Union[int, float, str]


def format_number(value: Union[int, float]) -> str:
    """Render a number the way the level format expects it.

    Integers are written in full. Floats get six significant digits with
    trailing zeros dropped.
    """
    if isinstance(value, bool):
        raise TypeError("a coordinate cannot be a boolean")
    if isinstance(value, int):
        return str(value)
    return f"{value:.6g}"


def _coordinate(value: Coordinate) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


class LevelScript:
    """Collects the lines of a level script."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def line(self, text: str = "") -> "LevelScript":
        """Append one line of raw script text. An empty line separates sections."""
        self._lines.append(text)
        return self

    def place(
        self, color: str, x: Coordinate, y: Coordinate, player: bool = False
    ) -> "LevelScript":
        """Append a marble placed at Cartesian coordinates."""
        prefix = "$place player" if player else "$place"
        return self.line(f"{prefix} {color} {_coordinate(x)} {_coordinate(y)}")

    def place_polar(
        self,
        color: str,
        radius: Coordinate,
        angle: Coordinate,
        player: bool = False,
    ) -> "LevelScript":
        """Append a marble placed at polar coordinates."""
        prefix = "$place player polar" if player else "$place polar"
        return self.line(
            f"{prefix} {color} {_coordinate(radius)} {_coordinate(angle)}"
        )

    def text(self) -> str:
        """Return the script, lines separated by newlines."""
        return "\n".join(self._lines)


def tutorial_level() -> str:
    """Return the tutorial level script."""
    script = LevelScript()
    script.line("$board 0").line()
    script.place("red", "random", "random")
    script.line("$delay 1 $place yellow 0 0")
    script.line("$delay 1 $place player blue 0 0")
    script.line("$delay 2")
    for color in ("red", "yellow", "blue"):
        script.line(f"$delay 3 repeat $place {color} random random")
    script.line()
    script.line("$score yellow == 0 max |Latest without Yellow: ")
    script.line("$score red >= 6 min |Earliest with 6 Red: ")
    return script.text()


def yinyang_level() -> str:
    """Return the Yin Yang level script."""
    script = LevelScript()
    script.line("$board 3").line()
    script.line("$collision w k 3 $quit").line()
    script.place("black", 0, -0.55)
    script.place("white", 0, 0.55)
    script.place("blue", 0.55, 0, player=True)
    script.place("red", 0, 0)
    script.place("yellow", -0.55, 0)
    script.line()
    return script.text()