"""Painting the game in a pygame window and running the event loop."""

import argparse
import math
import os

import pygame

from .drawing import Canvas, Color, Justify, LineStyle
from .game import Game

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
TITLE = "Adventure"
FPS = 60
_FONT_SIZE = 20
_DASH = 6
_CIRCLE_DASHES = 16

PALETTE = {
    Color.BLACK: (0, 0, 0),
    Color.BLUE: (0, 0, 168),
    Color.GREEN: (0, 168, 0),
    Color.CYAN: (0, 168, 168),
    Color.RED: (168, 0, 0),
    Color.MAGENTA: (168, 0, 168),
    Color.BROWN: (168, 84, 0),
    Color.LIGHTGRAY: (168, 168, 168),
    Color.DARKGRAY: (84, 84, 84),
    Color.LIGHTBLUE: (84, 84, 252),
    Color.LIGHTGREEN: (84, 252, 84),
    Color.LIGHTCYAN: (84, 252, 252),
    Color.LIGHTRED: (252, 84, 84),
    Color.LIGHTMAGENTA: (252, 84, 252),
    Color.YELLOW: (252, 252, 84),
    Color.WHITE: (252, 252, 252),
}


def _rect(left, top, right, bottom):
    x0, x1 = sorted((left, right))
    y0, y1 = sorted((top, bottom))
    return pygame.Rect(x0, y0, x1 - x0 + 1, y1 - y0 + 1)


class PygameCanvas(Canvas):
    """A canvas that paints on a pygame surface."""

    def __init__(self, surface):
        super().__init__()
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(None, _FONT_SIZE)
        self._images = {}

    @property
    def _pen(self):
        return PALETTE[self.color]

    @property
    def _width(self):
        return max(1, self.thickness)

    def set_color(self, color):
        super().set_color(color)

    def set_background(self, color):
        super().set_background(color)

    def set_fill(self, color):
        super().set_fill(color)

    def set_line_style(self, style, thickness):
        super().set_line_style(style, thickness)

    def rectangle(self, left, top, right, bottom):
        pygame.draw.rect(self.surface, self._pen, _rect(left, top, right, bottom), 1)

    def bar(self, left, top, right, bottom):
        pygame.draw.rect(self.surface, PALETTE[self.fill], _rect(left, top, right, bottom))

    def line(self, x1, y1, x2, y2):
        if self.line_style != LineStyle.DASHED:
            pygame.draw.line(self.surface, self._pen, (x1, y1), (x2, y2), self._width)
            return
        length = math.hypot(x2 - x1, y2 - y1)
        if length == 0:
            return
        dx = (x2 - x1) / length
        dy = (y2 - y1) / length
        for start in range(0, int(length), 2 * _DASH):
            end = min(start + _DASH, length)
            pygame.draw.line(
                self.surface,
                self._pen,
                (x1 + dx * start, y1 + dy * start),
                (x1 + dx * end, y1 + dy * end),
                self._width,
            )

    def circle(self, x, y, radius):
        if self.line_style != LineStyle.DASHED:
            pygame.draw.circle(self.surface, self._pen, (x, y), radius, self._width)
            return
        bounds = pygame.Rect(x - radius, y - radius, 2 * radius, 2 * radius)
        step = 2 * math.pi / _CIRCLE_DASHES
        for k in range(0, _CIRCLE_DASHES, 2):
            pygame.draw.arc(self.surface, self._pen, bounds, k * step, (k + 1) * step, self._width)

    def fill_ellipse(self, x, y, rx, ry):
        bounds = pygame.Rect(x - rx, y - ry, 2 * rx, 2 * ry)
        pygame.draw.ellipse(self.surface, PALETTE[self.fill], bounds)
        pygame.draw.ellipse(self.surface, self._pen, bounds, min(self._width, max(1, min(rx, ry))))

    def text(self, x, y, text, justify):
        justify = Justify(justify)
        rendered = [
            self._font.render(line, True, self._pen, PALETTE[self.background])
            for line in text.split("\n")
        ]
        line_height = self._font.get_linesize()
        width = max(r.get_width() for r in rendered)
        height = line_height * len(rendered)
        if justify == Justify.CENTER:
            left, top = x - width // 2, y - height // 2
        else:
            left, top = x, y
        for i, surface in enumerate(rendered):
            self.surface.blit(surface, (left, top + i * line_height))

    def _load(self, path):
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(path)
            except (pygame.error, OSError):
                self._images[path] = None
        return self._images[path]

    def image(self, path, left, top, right, bottom):
        picture = self._load(path)
        if picture is None:
            return
        size = (abs(right - left), abs(bottom - top))
        if size[0] == 0 or size[1] == 0:
            return
        scaled = pygame.transform.scale(picture, size)
        self.surface.blit(scaled, (min(left, right), min(top, bottom)))


def run(game):
    """Open the window and feed mouse events to the game until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        canvas = PygameCanvas(screen)
        clock = pygame.time.Clock()
        game.draw(canvas)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.MOUSEMOTION:
                    game.mouse_move(event.pos[0], event.pos[1], canvas)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.mouse_click_left(event.pos[0], event.pos[1], canvas)
                    if game.debug:
                        print(game.describe())
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv=None):
    """Start the game."""
    parser = argparse.ArgumentParser(prog="bgiquest", description="A point-and-click adventure.")
    parser.add_argument("--assets", help="directory holding the game's pictures")
    parser.add_argument("--quiet", action="store_true", help="do not print debug listings")
    args = parser.parse_args(argv)

    if args.assets is not None:
        if not os.path.isdir(args.assets):
            parser.error(f"no such directory: {args.assets}")
        os.chdir(args.assets)

    print("### Adventure ###")
    game = Game()
    game.debug = not args.quiet
    run(game)
    return 0