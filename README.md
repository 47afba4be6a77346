# marblelevels

Generators for the level scripts of a marble flocking game. A level script is plain
text made of `$` directives. The directives choose the board, set the collision and
behaviour rules between marble colours, place marbles by Cartesian or polar
coordinates, and say how the level is scored.

## Installation

```
pip install .
```

## Command line

Print the script for one level to standard output:

```
marblelevels galaxy
```

List the level names, one per line:

```
marblelevels --list
```

The levels are creatures, custom, engine, galaxy, moon, nebula, pandemonium,
platonic, redeye, shell, tutorial, whirlpool and yinyang. An unknown name, or no
name without `--list`, is an error. Run `marblelevels --help` for the usage text.

## From Python

```python
from marblelevels.cli import generate, level_names
from marblelevels.script import LevelScript

print(level_names())
print(generate("moon"))

script = LevelScript()
script.line("$board 0").line()
script.place("blue", 0, 0, player=True)
script.place_polar("red", 0.5, 1.0)
print(script.text())
```

- `marblelevels.cli.generate(name)` returns the script for a level. It raises
  `ValueError` for an unknown name. `level_names()` returns the names in sorted order.
- `marblelevels.script.LevelScript` collects lines. `line(text)` adds raw text, or an
  empty line if no text is given. `place(color, x, y, player=False)` and
  `place_polar(color, radius, angle, player=False)` add placement lines. Each of these
  returns the script, so calls can be chained. `text()` joins the lines with newlines.
  A coordinate can be a number or a word such as `random`.
- The level builders are also importable on their own:
  - `marblelevels.script`: `tutorial_level`, `yinyang_level`
  - `marblelevels.rings`: `creatures_level`, `engine_level`, `galaxy_level`,
    `platonic_level`
  - `marblelevels.spirals`: `custom_level`, `redeye_level`, `shell_level`,
    `whirlpool_level`
  - `marblelevels.scatter`: `moon_level`, `nebula_level`, `pandemonium_level`

`format_number` from `marblelevels.script` writes numbers the way the level files do.
Integers are written in full. Floats keep six significant digits with trailing zeros
dropped, so `0.6666666` is written as `0.666667`. A boolean raises `TypeError`.

## What it does not do

This package only writes level scripts. It does not read or check them, and it does
not include the game that plays them.

## Tests

```
pip install ".[test]"
pytest
```