"""Where the ghost goes relative to the menu box."""

from dataclasses import dataclass

MENU_INNER_WIDTH = 46
MENU_WIDTH = MENU_INNER_WIDTH + 2
FIGURE_WIDTH = 28
FIGURE_HEIGHT = 15
GUTTER = 3

# Rows of the box that are not items: top border, title, title separator,
# blank row before items, help separator, help row, bottom border
MENU_CHROME_ROWS = 7

SIDE = "side"
ABOVE = "above"
HIDDEN = "hidden"


@dataclass(frozen=True)
class MenuLayout:
    figure_position: str
    menu_width: int
    menu_height: int


def menu_height(project_count: int, action_count: int) -> int:
    separators = 1 if project_count > 0 else 0
    return MENU_CHROME_ROWS + 2 * (project_count + action_count) + separators


def calculate_layout(width: int, height: int, project_count: int,
                     action_count: int = 4) -> MenuLayout:
    """Place the figure beside the menu, above it, or nowhere.

    Side wins whenever the terminal is wide enough for menu, figure and
    both gutters; otherwise the figure goes above if there is room for it
    plus a blank row.
    """
    box_height = menu_height(project_count, action_count)
    if width >= MENU_WIDTH + GUTTER + FIGURE_WIDTH + GUTTER:
        position = SIDE
    elif height >= box_height + FIGURE_HEIGHT + 2:
        position = ABOVE
    else:
        position = HIDDEN
    return MenuLayout(figure_position=position, menu_width=MENU_WIDTH,
                      menu_height=box_height)
