import curses
import locale
import logging
import time

import constants
from app import GraphicsItem, TextItem

logger = logging.getLogger(f"{constants.LOGGER_NAME}.ui.terminal")

HEADER_HEIGHT = 2
CTRL_C = 3
QUIT = object()


def rgb_to_xterm256(color):
    """Map an RGB color onto the 6x6x6 cube of the xterm-256 palette."""
    r, g, b = (int(round(c / 255 * 5)) for c in color)
    return 16 + 36 * r + 6 * g + b


def rgb_to_basic(color):
    """Map an RGB color onto the eight basic curses colors."""
    r, g, b = (c > 127 for c in color)
    return r * curses.COLOR_RED + g * curses.COLOR_GREEN + b * curses.COLOR_BLUE


class ColorPairs:
    """Allocates curses color pairs lazily, one per (foreground, background)."""
    def __init__(self):
        self.pairs = {}
        self.enabled = curses.has_colors()
        if self.enabled:
            curses.start_color()
            curses.use_default_colors()
        self.rich = self.enabled and curses.COLORS >= 256

    def color_number(self, color):
        if color is None:
            return -1
        return rgb_to_xterm256(color) if self.rich else rgb_to_basic(color)

    def attr(self, fg=None, bg=None):
        """Return the attribute for the pair, or a monochrome fallback."""
        if not self.enabled:
            return curses.A_REVERSE if bg is not None else curses.A_BOLD
        key = (self.color_number(fg), self.color_number(bg))
        pair_id = self.pairs.get(key)
        if pair_id is None:
            pair_id = len(self.pairs) + 1
            if pair_id >= curses.COLOR_PAIRS:
                return curses.A_REVERSE if bg is not None else curses.A_BOLD
            curses.init_pair(pair_id, *key)
            self.pairs[key] = pair_id
        return curses.color_pair(pair_id)


class TerminalUi:
    def __init__(self, stdscr, cell_width=constants.TERMINAL_CELL_WIDTH):
        self.stdscr = stdscr
        self.cell_width = cell_width
        self.colors = ColorPairs()
        curses.curs_set(0)
        stdscr.keypad(True)

    def put(self, y, x, text, attr=curses.A_NORMAL):
        """Write text, ignoring the part that falls outside the window."""
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # curses raises when writing the bottom-right cell or off-screen
            pass

    def draw_box(self, top, left, height, width):
        self.put(top, left, "╭" + "─" * (width - 2) + "╮")
        for y in range(top + 1, top + height - 1):
            self.put(y, left, "│")
            self.put(y, left + width - 1, "│")
        self.put(top + height - 1, left, "╰" + "─" * (width - 2) + "╯")

    def draw_grid(self, grid, top, left):
        width, height = grid.dimensions()
        for y in range(height):
            for x in range(width):
                cell = grid.get_cell((x, y))
                column = left + x * self.cell_width
                if cell is None:
                    continue
                if cell.symbol:
                    self.put(top + y, column, cell.symbol.center(self.cell_width),
                             self.colors.attr(fg=cell.color))
                else:
                    self.put(top + y, column, " " * self.cell_width,
                             self.colors.attr(bg=cell.color))

    def draw_side_panel(self, side_panel, left):
        y = 0
        for item in side_panel.items:
            if isinstance(item, TextItem):
                lines = item.text.splitlines() or [""]
                width = max(len(line) for line in lines) + 2
                self.draw_box(y, left, len(lines) + 2, width)
                for i, line in enumerate(lines):
                    self.put(y + 1 + i, left + 1, line)
                y += len(lines) + 2
            elif isinstance(item, GraphicsItem):
                self.draw_grid(item.grid, y, left + 1)
                y += item.grid.dimensions()[1] + 1

    def render(self, graphics):
        """Draw the title, the boxed main grid and the side panel."""
        self.stdscr.erase()
        width, height = graphics.grid.dimensions()
        box_width = width * self.cell_width + 2
        box_height = height + HEADER_HEIGHT + 2

        self.draw_box(0, 0, box_height, box_width)
        self.put(1, 1, graphics.title[:box_width - 2].center(box_width - 2),
                 self.colors.attr(fg=(0, 0, 255)) | curses.A_BOLD)
        self.put(2, 1, "═" * (box_width - 2))
        self.draw_grid(graphics.grid, 1 + HEADER_HEIGHT, 1)

        if graphics.side_panel is not None:
            self.draw_side_panel(graphics.side_panel, box_width + 1)

        self.stdscr.refresh()

    def next_key(self, timeout):
        """Wait up to timeout seconds for a key; return it, QUIT, or None."""
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        key = self.stdscr.getch()
        if key == -1:
            return None
        if key in (ord('q'), ord('Q'), CTRL_C):
            return QUIT
        if 0 <= key < 256 and chr(key).isprintable():
            return chr(key).lower()
        return None


def _main(stdscr, app, cell_width):
    ui = TerminalUi(stdscr, cell_width)
    ui.render(app.graphics)
    frame_duration = 1.0 / app.frame_rate
    previous_update = time.monotonic()

    while True:
        remaining = frame_duration - (time.monotonic() - previous_update)
        while remaining > 0:
            key = ui.next_key(remaining)
            if key is QUIT:
                return
            if key is not None:
                app.handle_pressed_key(key)
                # Terminals don't report key releases, so every press is
                # followed by an immediate release.
                app.handle_released_key(key)
            remaining = frame_duration - (time.monotonic() - previous_update)

        app.run_frame()
        previous_update = time.monotonic()
        ui.render(app.graphics)


def run_main_loop(app, cell_width=constants.TERMINAL_CELL_WIDTH):
    """Run the app in the terminal until 'q' or Ctrl-C."""
    locale.setlocale(locale.LC_ALL, '')
    logger.info(f"Starting terminal UI for {app.graphics.title!r} at {app.frame_rate} fps")
    try:
        curses.wrapper(_main, app, cell_width)
    except KeyboardInterrupt:
        pass
    logger.info("Terminal UI closed")
