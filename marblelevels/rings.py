"""Levels whose marbles sit on rings around the centre."""

from __future__ import annotations

from marblelevels.script import PI, LevelScript


def creatures_level() -> str:
    """Return the creatures level script."""
    orange_count = 18
    green_count = 36
    green_layers = 3
    purple_count = 12

    script = LevelScript()
    script.line("$board 5").line()
    script.line("$highlight_player true").line("$quit_on_death true").line()
    script.line("$alignment_weight green 2").line()
    script.place("green", 0, 0, player=True)

    for i in range(orange_count):
        angle = (PI * i) / orange_count - PI / 2
        script.place_polar("orange", 0.75, angle)

    per_layer = green_count // green_layers
    for layer in range(green_layers):
        radius = (layer + 1) * 0.1
        for j in range(per_layer):
            script.place_polar("green", radius, 2 * PI * j / per_layer)

    for i in range(purple_count // 3):
        offset = (i - 1) * 0.1
        for _ in range(3):
            script.place("purple", offset - 0.875, offset)

    script.line("$score purple == 0 min |Eliminate Purple Scavengers: ")
    script.line("$score orange == 0 min |Eliminate Orange Pack: ")
    script.line("$score green == 1 max |Survive Alone: ")
    return script.text()


def engine_level() -> str:
    """Return the radial engine level script."""
    piston_count = 6
    ring_colors = ("gray", "red", "gray")
    radii = (0.05, 0.5, 1.0)
    piston_lengths = (0.6, 0.1, 0.8, 0.3, 0.9, 0.1)

    script = LevelScript()
    script.line("$board 9").line()
    script.line("$behavior r a 2").line("$collision r a 2").line()
    script.place("blue", 0, 0, player=True)

    for ring, (color, ring_radius) in enumerate(zip(ring_colors, radii)):
        for i, piston_length in enumerate(piston_lengths[:piston_count]):
            radius = piston_length if ring == 1 else ring_radius
            angle = 2 * PI * (i + 0.5) / piston_count
            script.place_polar(color, radius, angle)

    script.line()
    script.line("$score red == 0 min |Eliminate Red: ")
    return script.text()


def galaxy_level() -> str:
    """Return the galaxy level script."""
    colors = ("red", "yellow", "blue")
    opposite_colors = ("blue", "yellow", "red")
    rings = ((0.25, 12), (0.75, 18), (1.0, 18))

    script = LevelScript()
    script.line("$board 7").line()
    script.line("$highlight_player true").line("$quit_on_death true").line()
    script.line("$freeze a true").line()
    for code in "ryb":
        script.line(f"$collision {code} a 2")
    for code in "ryb":
        script.line(f"$behavior {code} a 2")
    script.line()
    script.place("blue", 0, 0, player=True)
    script.line()

    last = len(rings) - 1
    for ring, (radius, count) in enumerate(rings):
        palette = colors if ring % 2 else opposite_colors
        for j in range(count):
            color = "gray" if ring == last else palette[j % 3]
            script.place_polar(color, radius, 2 * PI * j / count)

    script.line()
    script.line("$score red == 0 min |Eliminate Red: ")
    return script.text()


def platonic_level() -> str:
    """Return the platonic solids level script."""
    colors = ("red", "yellow", "blue")
    secondary_colors = ("purple", "orange", "green")
    radii = (0, 0.25, 0.45, 0.666666, 0.875, 1.0)
    gray_spokes = 6
    flock_spokes = 12

    script = LevelScript()
    script.line("$board 8").line()
    script.line("$freeze a true").line()
    script.line("$highlight_player true").line("$quit_on_death true").line()
    for color in ("orange", "green", "purple"):
        script.line(f"$alignment_weight {color} 2").line()
    for code in "roygbp":
        script.line(f"$collision {code} a 2")
    for code in "roygbp":
        script.line(f"$behavior {code} a 2")
    script.line()
    for prey, hunter, victim in (
        ("red", "purple", "blue"),
        ("yellow", "orange", "red"),
        ("blue", "green", "yellow"),
    ):
        script.line(f"$collision {prey} {hunter} 0")
        script.line(f"$behavior {prey} {hunter} 0")
        script.line(f"$behavior {hunter} {prey} 3")
        script.line(f"$collision {prey} {victim} 1 {hunter}")
        script.line()

    for ring, radius in enumerate(radii[1:], start=1):
        flock = ring % 2 == 1
        spokes = flock_spokes if flock else gray_spokes
        for i in range(spokes):
            angle = 2 * PI * (i + 0.5) / spokes
            if not flock:
                script.place_polar("gray", radius, angle)
            elif ring == 3 and i == 11:
                script.place_polar(colors[i // 4], radius, angle, player=True)
            elif ring == 5 and i % 4 == 0:
                script.place_polar(secondary_colors[i // 4], radius, angle)
            else:
                script.place_polar(colors[i // 4], radius, angle)

    script.line()
    script.line("$score red == 0 min |Eliminate Red: ")
    script.line("$score orange == 0 min |Eliminate Orange: ")
    script.line("$score purple == 0 min |Eliminate Purple: ")
    return script.text()