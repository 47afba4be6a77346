import math

from marblelevels.spirals import custom_level, redeye_level, shell_level, whirlpool_level


def _placements(text):
    """Parse place lines into (player, polar, color, a, b) tuples."""
    result = []
    for line in text.splitlines():
        words = line.split()
        if not words or words[0] != "$place":
            continue
        words = words[1:]
        player = words[0] == "player"
        if player:
            words = words[1:]
        polar = words[0] == "polar"
        if polar:
            words = words[1:]
        color, a, b = words
        result.append((player, polar, color, float(a), float(b)))
    return result


def test_custom_header():
    text = custom_level()
    assert text.startswith("$board 0\n\n$label 0 0 0 |Custom\\nLevel\n\n$delay 10 $quit\n\n")
    assert "$collision b w 0\n$collision b k 0\n" in text
    assert "$collision n n 0\n\n" in text


def test_custom_collision_blocks_are_triangular():
    lines = [l for l in custom_level().splitlines() if l.startswith("$collision")]
    firsts = [l.split()[1] for l in lines]
    for index, code in enumerate("kwrybogpan"):
        assert firsts.count(code) == index + 1


def test_custom_placements():
    placements = _placements(custom_level())
    assert len(placements) == 168
    assert placements[0] == (True, False, "black", 0.0, 0.0)
    assert all(polar for _, polar, *_ in placements[1:])
    assert all(0 <= r <= 1.0 for _, _, _, r, _ in placements[1:])
    radii = [r for _, _, _, r, _ in placements[1:]]
    assert radii == sorted(radii)


def test_custom_rings_balanced():
    colors = [c for _, _, c, _, _ in _placements(custom_level())]
    assert colors.count("gray") == colors.count("white")
    assert colors[-1] == "white"


def test_custom_ends_with_newline():
    assert custom_level().endswith("\n")
    assert not custom_level().endswith("\n\n")


def test_redeye_fixed_lines():
    text = redeye_level()
    assert text.startswith("$board 4\n\n$quit_on_death true\n\n$place player blue 0 0\n")
    assert "$place yellow -0.05 0\n$place yellow 0 0.05\n$place yellow 0.05 0\n" in text
    assert text.endswith(
        "$score red == 0 min |Eliminate Red: \n"
        "$score yellow == 0 min |Eliminate Yellow: \n"
        "$score yellow == 0 max |Survive without Yellow: "
    )


def test_redeye_red_spiral():
    reds = [p for p in _placements(redeye_level()) if p[2] == "red"]
    assert len(reds) == 24
    assert all(polar and not player for player, polar, *_ in reds)
    radii = [r for *_, r, _ in reds]
    assert radii == sorted(radii)
    assert all(0 < r < 1 for r in radii)


def test_shell_structure():
    text = shell_level()
    assert text.startswith("If you want to add a player to this level")
    assert "\n$board 6\n" in text
    assert "$collision white black 3 $quit" in text
    assert text.endswith("$place black 0 -1\n\n")


def test_shell_spiral():
    placements = [p for p in _placements(shell_level()) if p[1]]
    colors = [c for _, _, c, _, _ in placements]
    order = ["yellow", "orange", "red", "brown"]
    assert [order.index(c) for c in colors] == sorted(order.index(c) for c in colors)
    assert set(colors) == set(order)
    radii = [r for *_, r, _ in placements]
    assert radii == sorted(radii)
    assert all(0 < r < 1 for r in radii)
    assert not any(player for player, *_ in placements)


def test_whirlpool_structure():
    text = whirlpool_level()
    assert text.startswith(
        "$board 2\n\n$highlight_player true\n\n$vampiric_player true\n\n"
        "$place player blue 0 0.25\n"
    )
    assert text.endswith("\n\n$score red == 0 min |Eliminate Red: ")


def test_whirlpool_marbles_inside_board():
    placements = _placements(whirlpool_level())[1:]
    assert placements
    for player, polar, color, x, y in placements:
        assert not player and not polar
        assert color in {"blue", "yellow", "red"}
        assert y < 1.0
        assert x < math.sqrt(max(0.0, 1 - y * y)) + 1e-5


def test_levels_deterministic():
    whirlpool = whirlpool_level()
    assert whirlpool.startswith("$board 2\n")
    assert whirlpool_level() == whirlpool
    custom = custom_level()
    assert custom.startswith("$board 0\n")
    assert len(_placements(custom_level())) == len(_placements(custom)) == 168
    assert custom_level() == custom