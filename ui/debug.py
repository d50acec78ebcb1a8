import logging
import sys

import constants

logger = logging.getLogger(f"{constants.LOGGER_NAME}.ui.debug")

RESET = "\x1b[0m"


def background(color):
    """Return the 24-bit ANSI escape selecting color as background."""
    r, g, b = color
    return f"\x1b[48;2;{r};{g};{b}m"


def dump(grid, out=sys.stdout):
    """Print the grid framed by +---+ borders, one character per cell."""
    width, height = grid.dimensions()
    border = "+" + "-" * width + "+"
    print(border, file=out)
    for y in range(height):
        row = []
        for x in range(width):
            cell = grid.get_cell((x, y))
            if cell is None:
                row.append(" ")
            else:
                row.append(f"{background(cell.color)} {RESET}")
        print("|" + "".join(row) + "|", file=out)
    print(border, file=out)


def run_main_loop(app, read_line=input, out=sys.stdout):
    """Step the app one frame per line of input; 'q' quits."""
    print(f"Title: {app.graphics.title!r}", file=out)
    while True:
        dump(app.graphics.grid, out)
        try:
            line = read_line("> ")
        except EOFError:
            line = "q"
        key = line[:1]
        if key == 'q':
            print("Good bye.", file=out)
            break
        if key:
            logger.debug(f"Key {key!r}")
            app.handle_pressed_key(key)
        app.run_frame()
