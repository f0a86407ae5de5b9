"""The main-menu user interface tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

FONT_PATH = "fonts/FiraSans-Bold.ttf"

BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)
GRAY = (0.5, 0.5, 0.5)

NODE = "node"
TEXT = "text"
BUTTON = "button"

CENTER = "center"


@dataclass(eq=False)
class MenuNode:
    """A UI element: a container, a text label or a button.

    Sizes are strings such as ``"100%"`` or ``"200px"``.
    """

    kind: str
    text: str | None = None
    font: str | None = None
    font_size: float | None = None
    color: tuple[float, float, float] | None = None
    background: tuple[float, float, float] | None = None
    width: str | None = None
    height: str | None = None
    margin_bottom: float = 0.0
    justify_content: str | None = None
    align_items: str | None = None
    main_menu: bool = False
    children: list[MenuNode] = field(default_factory=list)

    def walk(self) -> Iterator[MenuNode]:
        """Yield this node and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


def spawn_menu() -> MenuNode:
    """Build the full-screen main menu: the title and a Play button."""
    title = MenuNode(
        TEXT,
        text="EGGSHOT",
        font=FONT_PATH,
        font_size=64.0,
        color=WHITE,
        margin_bottom=20.0,
    )
    play_label = MenuNode(
        TEXT,
        text="Play",
        font=FONT_PATH,
        font_size=32.0,
        color=BLACK,
    )
    play_button = MenuNode(
        BUTTON,
        background=GRAY,
        width="200px",
        height="65px",
        justify_content=CENTER,
        align_items=CENTER,
        children=[play_label],
    )
    return MenuNode(
        NODE,
        background=BLACK,
        width="100%",
        height="100%",
        justify_content=CENTER,
        align_items=CENTER,
        main_menu=True,
        children=[title, play_button],
    )