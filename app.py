import random

DIRECTION_OFFSETS = {
    'up': (0, -1),
    'left': (-1, 0),
    'down': (0, 1),
    'right': (1, 0),
}


def translated(point, direction):
    """Return the point moved one cell in the named direction."""
    dx, dy = DIRECTION_OFFSETS[direction]
    return point[0] + dx, point[1] + dy


class TextItem:
    """Side panel entry holding text."""
    def __init__(self, text=""):
        self.text = text

    def __repr__(self):
        return f"TextItem({self.text!r})"


class GraphicsItem:
    """Side panel entry holding a small grid, such as a preview or a minimap."""
    def __init__(self, grid):
        self.grid = grid

    def __repr__(self):
        return f"GraphicsItem({self.grid.dimensions()})"


class SidePanel:
    """Ordered list of text and graphics items shown next to the main grid."""
    def __init__(self, items):
        self.items = list(items)

    def text_item(self, index):
        """Return the text item at index, raising TypeError if it holds graphics."""
        item = self.items[index]
        if not isinstance(item, TextItem):
            raise TypeError(f"Side panel item {index} is not text: {item!r}")
        return item

    def set_text(self, index, text):
        """Replace the text of the item at index."""
        self.text_item(index).text = text

    def graphics_item(self, index):
        """Return the grid of the item at index, raising TypeError if it holds text."""
        item = self.items[index]
        if not isinstance(item, GraphicsItem):
            raise TypeError(f"Side panel item {index} is not graphics: {item!r}")
        return item.grid


class Graphics:
    """Everything a front end draws: title, main grid and optional side panel."""
    def __init__(self, title, grid, side_panel=None):
        self.title = title
        self.grid = grid
        self.side_panel = side_panel


class App:
    """Base class for every game driven by a front end.

    Subclasses set `graphics` and `frame_rate` in their constructor and
    implement `run_frame`. Every random choice goes through `self.rng` so a
    seeded generator makes a run reproducible.
    """
    frame_rate = 10

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.graphics = None

    def run_frame(self):
        """Advance the game by one tick."""
        raise NotImplementedError

    def handle_pressed_key(self, key):
        """Handle a single lower-case character key press."""

    def handle_released_key(self, key):
        """Handle the release of a previously pressed key."""
