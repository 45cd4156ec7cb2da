import pygame
import pytest

from bgiquest.drawing import Color, Justify, LineStyle, frame
from bgiquest.render import PALETTE, PygameCanvas, main


def _target():
    target = pygame.Surface((120, 120))
    target.fill((0, 0, 0))
    return target


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_palette_covers_all_colors():
    assert set(PALETTE) == set(Color)
    assert PALETTE[Color.BLACK] == (0, 0, 0)
    surface = _target()
    canvas = PygameCanvas(surface)
    for color in Color:
        canvas.set_fill(color)
        canvas.bar(0, 0, 10, 10)
        assert _pixel(surface, 5, 5) == PALETTE[color]


def test_state_setters():
    canvas = PygameCanvas(_target())
    canvas.set_color(Color.RED)
    canvas.set_background(Color.BLUE)
    canvas.set_fill(Color.YELLOW)
    canvas.set_line_style(LineStyle.DASHED, 3)
    assert canvas.color == Color.RED
    assert canvas.background == Color.BLUE
    assert canvas.fill == Color.YELLOW
    assert canvas.line_style == LineStyle.DASHED
    assert canvas.thickness == 3


def test_bar_fills_with_fill_color():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_fill(Color.LIGHTGREEN)
    canvas.bar(10, 10, 30, 30)
    assert _pixel(surface, 20, 20) == PALETTE[Color.LIGHTGREEN]
    assert _pixel(surface, 31, 31) == (0, 0, 0)


def test_rectangle_outline_only():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_color(Color.GREEN)
    canvas.rectangle(10, 10, 30, 30)
    assert _pixel(surface, 10, 20) == PALETTE[Color.GREEN]
    assert _pixel(surface, 30, 30) == PALETTE[Color.GREEN]
    assert _pixel(surface, 20, 20) == (0, 0, 0)


def test_frame_is_thick():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_color(Color.YELLOW)
    frame(canvas, 10, 10, 60, 60, 6)
    assert all(_pixel(surface, 10 + i, 30) == PALETTE[Color.YELLOW] for i in range(6))
    assert _pixel(surface, 16, 30) == (0, 0, 0)


def test_solid_line():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_color(Color.WHITE)
    canvas.line(0, 50, 100, 50)
    assert _pixel(surface, 50, 50) == PALETTE[Color.WHITE]


def test_dashed_line_has_gaps():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_color(Color.WHITE)
    canvas.set_line_style(LineStyle.DASHED, 1)
    canvas.line(0, 50, 100, 50)
    row = [_pixel(surface, x, 50) for x in range(100)]
    assert PALETTE[Color.WHITE] in row
    assert (0, 0, 0) in row


def test_fill_ellipse_centre_uses_fill():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_fill(Color.RED)
    canvas.set_color(Color.GREEN)
    canvas.fill_ellipse(60, 60, 30, 30)
    assert _pixel(surface, 60, 60) == PALETTE[Color.RED]
    assert _pixel(surface, 2, 2) == (0, 0, 0)


def test_text_paints_background():
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.set_color(Color.WHITE)
    canvas.set_background(Color.BLUE)
    canvas.text(5, 5, "Empty", Justify.TOP_LEFT)
    box = [_pixel(surface, x, y) for x in range(5, 15) for y in range(5, 15)]
    assert PALETTE[Color.BLUE] in box
    assert _pixel(surface, 119, 119) == (0, 0, 0)


def test_image_is_scaled_into_box(tmp_path):
    picture = pygame.Surface((4, 4))
    picture.fill((10, 200, 30))
    path = tmp_path / "pic.bmp"
    pygame.image.save(picture, str(path))
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.image(str(path), 10, 10, 40, 40)
    assert _pixel(surface, 25, 25) == (10, 200, 30)
    assert _pixel(surface, 45, 45) == (0, 0, 0)


def test_missing_image_is_skipped(tmp_path):
    surface = _target()
    canvas = PygameCanvas(surface)
    canvas.image(str(tmp_path / "missing.bmp"), 10, 10, 40, 40)
    assert _pixel(surface, 25, 25) == (0, 0, 0)


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--assets" in capsys.readouterr().out


def test_main_rejects_missing_asset_dir(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--assets", str(tmp_path / "nowhere")])
    assert excinfo.value.code == 2