import pytest

from marblelevels.cli import generate, level_names, main
from marblelevels.scatter import moon_level
from marblelevels.script import tutorial_level
from marblelevels.spirals import shell_level


def test_level_names_sorted_and_complete():
    names = level_names()
    assert names == sorted(names)
    assert {"tutorial", "yinyang", "moon", "shell", "custom"} <= set(names)
    assert len(names) == len(set(names))


def test_generate_matches_builders():
    assert generate("moon") == moon_level()
    assert generate("shell") == shell_level()


def test_every_level_starts_with_board_or_note():
    for name in level_names():
        text = generate(name)
        assert "$board " in text
        assert "$place" in text


def test_generate_unknown_level():
    with pytest.raises(ValueError, match="unknown level"):
        generate("nope")


def test_main_prints_level(capsys):
    assert main(["tutorial"]) == 0
    assert capsys.readouterr().out == tutorial_level()


def test_main_lists_levels(capsys):
    assert main(["--list"]) == 0
    assert capsys.readouterr().out.splitlines() == level_names()


def test_main_requires_level():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_main_rejects_unknown_level():
    with pytest.raises(SystemExit) as info:
        main(["bogus"])
    assert info.value.code == 2