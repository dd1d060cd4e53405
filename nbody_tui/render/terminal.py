"""Terminal renderer using curses.

Layout: the canvas takes the top 75% of the screen; the bottom strip is
split into entity info and settings (stacked, left) and logs (right).
"""

import curses
import locale
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, NamedTuple, Optional
from nbody_tui.render.base import Canvas, Renderer
from nbody_tui.render.keys import Key, KeyEvent

if TYPE_CHECKING:
    from nbody_tui.simulations.engine import Simulation

COLOR_NAMES = {
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "gray": curses.COLOR_WHITE,
    "white": curses.COLOR_WHITE,
}
SELECTED_PAIR = len(COLOR_NAMES) + 1
HINT_PAIR = len(COLOR_NAMES) + 2

ARROW_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
}

KEY_HELP = ((" Quit ", "<Q> "), (" Reset ", "<R> "), (" Pause ", "<Spacebar> "))


class Rect(NamedTuple):
    y: int
    x: int
    height: int
    width: int

    def inner(self) -> "Rect":
        return Rect(self.y + 1, self.x + 1, max(self.height - 2, 0), max(self.width - 2, 0))


def split_vertical(area: Rect, percent: int):
    top = area.height * percent // 100
    return (
        Rect(area.y, area.x, top, area.width),
        Rect(area.y + top, area.x, area.height - top, area.width),
    )


def split_horizontal(area: Rect, percent: int):
    left = area.width * percent // 100
    return (
        Rect(area.y, area.x, area.height, left),
        Rect(area.y, area.x + left, area.height, area.width - left),
    )


class TerminalCanvas(Canvas):
    """Maps world coordinates onto the cells of a screen rectangle."""

    def __init__(self, renderer: "TerminalRenderer", area: Rect, bounds):
        self.renderer = renderer
        self.area = area
        self.x_min, self.x_max, self.y_min, self.y_max = bounds

    def cell(self, x: float, y: float):
        """Return (row, col) for a world point, or None when off-canvas."""
        if self.area.height <= 0 or self.area.width <= 0:
            return None
        # NaN fails both comparisons and is dropped here too
        if not (self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max):
            return None
        fx = (x - self.x_min) / (self.x_max - self.x_min)
        fy = (y - self.y_min) / (self.y_max - self.y_min)
        col = self.area.x + int(round(fx * (self.area.width - 1)))
        row = self.area.y + (self.area.height - 1) - int(round(fy * (self.area.height - 1)))
        return row, col

    def print(self, x: float, y: float, glyph: str, color: str):
        cell = self.cell(x, y)
        if cell is not None:
            self.renderer.put(cell[0], cell[1], glyph, self.renderer.color(color))


class TerminalRenderer(Renderer):
    """Draws the engine state with curses and reads keys from it."""

    def __init__(self, screen, colors: Optional[bool] = None):
        """Initialize renderer.

        Args:
            screen: curses window returned by init()
            colors: Use color pairs (queried from the terminal if None)
        """
        self.screen = screen
        self._colors = curses.has_colors() if colors is None else colors

    def color(self, name: str) -> int:
        if not self._colors or name not in COLOR_NAMES:
            return curses.A_NORMAL
        attr = curses.color_pair(list(COLOR_NAMES).index(name) + 1)
        if name == "gray":
            attr |= curses.A_DIM
        return attr

    def put(self, row: int, col: int, text: str, attr: int = curses.A_NORMAL, limit: Optional[int] = None):
        """Write ``text`` clipped to the screen (and to ``limit`` columns)."""
        height, width = self.screen.getmaxyx()
        if row < 0 or row >= height or col < 0 or col >= width:
            return
        room = width - col
        if limit is not None:
            room = min(room, limit)
        text = text[:max(room, 0)]
        if not text:
            return
        try:
            self.screen.addstr(row, col, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen and
            # reports an error after the character has been drawn.
            pass

    def box(self, area: Rect, title: str = "", footer: str = "", footer_right: bool = False):
        if area.height < 2 or area.width < 2:
            return
        horizontal = "━" * (area.width - 2)
        self.put(area.y, area.x, "┏" + horizontal + "┓")
        for row in range(area.y + 1, area.y + area.height - 1):
            self.put(row, area.x, "┃")
            self.put(row, area.x + area.width - 1, "┃")
        self.put(area.y + area.height - 1, area.x, "┗" + horizontal + "┛")
        if title:
            self.put(area.y, area.x + 1, title, curses.A_BOLD, limit=area.width - 2)
        if footer:
            col = area.x + area.width - 1 - len(footer) if footer_right else area.x + 1
            self.put(area.y + area.height - 1, max(col, area.x + 1), footer, curses.A_BOLD,
                     limit=area.width - 2)

    def _centered(self, row: int, area: Rect, text: str, attr: int = curses.A_BOLD):
        col = area.x + max((area.width - len(text)) // 2, 1)
        self.put(row, col, text, attr, limit=area.width - 2)

    def draw(self, simulation: "Simulation"):
        sim = simulation.simulation
        height, width = self.screen.getmaxyx()
        self.screen.erase()

        screen = Rect(0, 0, height, width)
        canvas_area, bottom = split_vertical(screen, 75)
        left, logs_area = split_horizontal(bottom, 50)
        info_area, settings_area = split_vertical(left, 50)

        # Canvas
        self.box(canvas_area)
        self._centered(canvas_area.y, canvas_area, sim.canvas_title())
        self._draw_key_help(canvas_area)
        sim.canvas_render(TerminalCanvas(self, canvas_area.inner(), sim.canvas_bounds()))

        # Entity info
        self.box(info_area, sim.info_title())
        inner = info_area.inner()
        for offset, line in enumerate(sim.info_text()[:inner.height]):
            col = inner.x
            if line.marker is not None:
                self.put(inner.y + offset, col, line.marker.glyph, self.color(line.marker.color))
                col += len(line.marker.glyph)
            self.put(inner.y + offset, col, line.text, limit=inner.x + inner.width - col)

        # Settings
        self.box(settings_area, " Simulation Settings ")
        inner = settings_area.inner()
        selected_attr = curses.color_pair(SELECTED_PAIR) if self._colors else curses.A_REVERSE
        for offset, (text, selected) in enumerate(sim.settings.render()[:inner.height]):
            self.put(inner.y + offset, inner.x, text.expandtabs(12),
                     selected_attr if selected else curses.A_NORMAL, limit=inner.width)

        # Logs
        self.box(logs_area, " Logs ", f" {int(simulation.fps)}fps ", footer_right=True)
        inner = logs_area.inner()
        lines = simulation.recent_logs(10).splitlines()[-inner.height:] if inner.height else []
        for offset, text in enumerate(lines):
            self.put(inner.y + offset, inner.x, text, limit=inner.width)

        self.screen.refresh()

    def _draw_key_help(self, area: Rect):
        total = sum(len(label) + len(key) for label, key in KEY_HELP)
        col = area.x + max((area.width - total) // 2, 1)
        row = area.y + area.height - 1
        hint_attr = (curses.color_pair(HINT_PAIR) if self._colors else curses.A_NORMAL) | curses.A_BOLD
        for label, key in KEY_HELP:
            self.put(row, col, label)
            col += len(label)
            self.put(row, col, key, hint_attr)
            col += len(key)

    def poll(self, timeout: float) -> Optional[KeyEvent]:
        self.screen.timeout(max(int(timeout * 1000), 0))
        code = self.screen.getch()
        if code == -1:
            return None
        if code in ARROW_KEYS:
            return ARROW_KEYS[code]
        if 32 <= code < 127:
            return chr(code)
        return None

    def close(self):
        restore()


_active_screen = None


def init():
    """Put the terminal in raw-ish mode and return the screen window."""
    global _active_screen
    # Box-drawing and body glyphs need the user's (UTF-8) locale
    locale.setlocale(locale.LC_ALL, "")
    screen = curses.initscr()
    _active_screen = screen
    curses.noecho()
    curses.cbreak()
    screen.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        # Some terminals cannot hide the cursor
        pass
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()
        for index, color in enumerate(COLOR_NAMES.values(), start=1):
            curses.init_pair(index, color, -1)
        curses.init_pair(SELECTED_PAIR, curses.COLOR_BLACK, curses.COLOR_GREEN)
        curses.init_pair(HINT_PAIR, curses.COLOR_BLUE, -1)
    return screen


def restore():
    """Undo init(). Safe to call more than once, or before init()."""
    global _active_screen
    if _active_screen is None:
        return
    screen, _active_screen = _active_screen, None
    screen.keypad(False)
    curses.nocbreak()
    curses.echo()
    curses.endwin()


def install_hooks():
    """Restore the terminal before an uncaught exception is printed."""
    previous_hook = sys.excepthook

    def hook(exc_type, exc_value, traceback):
        restore()
        previous_hook(exc_type, exc_value, traceback)

    sys.excepthook = hook


@contextmanager
def terminal() -> Iterator[TerminalRenderer]:
    """Yield a renderer for the whole terminal, restoring it afterwards."""
    screen = init()
    renderer = TerminalRenderer(screen)
    try:
        yield renderer
    finally:
        renderer.close()
