import logging

import pygame

import constants
from app import GraphicsItem, TextItem

logger = logging.getLogger(f"{constants.LOGGER_NAME}.ui.window")

MARGIN = constants.WINDOW_MARGIN
CELL_SIZE = constants.WINDOW_CELL_SIZE
TEXT_AREA_WIDTH = constants.WINDOW_TEXT_AREA_WIDTH
PANEL_ITEM_SPACING = 20
LINE_SPACING = 4

KEY_CHARS = {
    pygame.K_w: 'w',
    pygame.K_a: 'a',
    pygame.K_s: 's',
    pygame.K_d: 'd',
}


def window_size(graphics):
    """Return the window size needed for the grid plus an optional side panel."""
    width, height = graphics.grid.dimensions()
    window_w = MARGIN * 2 + CELL_SIZE * width
    if graphics.side_panel is not None:
        window_w += TEXT_AREA_WIDTH
    window_h = MARGIN * 2 + CELL_SIZE * height
    return window_w, window_h


def draw_grid(surface, grid, destination):
    """Draw every non-empty cell as a filled square."""
    left, top = destination
    for (x, y), cell in grid:
        if cell is not None:
            pygame.draw.rect(surface, cell.color,
                             (left + x * CELL_SIZE, top + y * CELL_SIZE, CELL_SIZE, CELL_SIZE))


def draw_text(surface, font, text, destination):
    """Blit text line by line and return the height used."""
    left, top = destination
    y = top
    for line in text.splitlines():
        rendered = font.render(line, True, constants.WINDOW_TEXT_COLOR)
        surface.blit(rendered, (left, y))
        y += rendered.get_height() + LINE_SPACING
    return y - top


def draw(window, font, graphics):
    window.fill(constants.WINDOW_BG_COLOR)
    width, height = graphics.grid.dimensions()
    graphics_width = CELL_SIZE * width
    graphics_height = CELL_SIZE * height

    pygame.draw.rect(window, constants.WINDOW_GRID_BG_COLOR,
                     (MARGIN, MARGIN, graphics_width, graphics_height))
    draw_grid(window, graphics.grid, (MARGIN, MARGIN))

    if graphics.side_panel is not None:
        y = MARGIN
        x = MARGIN * 2 + graphics_width
        for item in graphics.side_panel.items:
            if isinstance(item, TextItem):
                y += draw_text(window, font, item.text, (x, y)) + PANEL_ITEM_SPACING
            elif isinstance(item, GraphicsItem):
                draw_grid(window, item.grid, (x, y))
                y += item.grid.dimensions()[1] * CELL_SIZE + PANEL_ITEM_SPACING

    pygame.display.flip()


def run_main_loop(app):
    """Open a window and run the app at its frame rate until closed or 'q' is pressed."""
    pygame.init()
    try:
        title = app.graphics.title
        window = pygame.display.set_mode(window_size(app.graphics))
        pygame.display.set_caption(title)
        font = pygame.font.SysFont(None, constants.WINDOW_FONT_SIZE)
        clock = pygame.time.Clock()
        frame_duration = 1000 / app.frame_rate
        accumulated = 0.0
        logger.info(f"Starting window UI for {title!r} at {app.frame_rate} fps")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        running = False
                    elif event.key in KEY_CHARS:
                        app.handle_pressed_key(KEY_CHARS[event.key])
                    else:
                        logger.debug(f"Unhandled key: {pygame.key.name(event.key)}")
                elif event.type == pygame.KEYUP:
                    if event.key in KEY_CHARS:
                        app.handle_released_key(KEY_CHARS[event.key])

            # fixed-rate updates, independent of the drawing rate
            accumulated += clock.tick(constants.WINDOW_FPS)
            while accumulated >= frame_duration:
                app.run_frame()
                accumulated -= frame_duration

            if app.graphics.title != title:
                title = app.graphics.title
                pygame.display.set_caption(title)

            draw(window, font, app.graphics)
    finally:
        pygame.quit()
        logger.info("Window UI closed")
