"""Screen layouts for the boot and main-menu screens, hit testing and drawing."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

import pygame

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
PANEL_COLOR: Color = (244, 144, 183)
BUTTON_COLOR: Color = (199, 236, 250)
BUTTON_TEXT_COLOR: Color = (29, 45, 60)

BUTTON_SIZE = (160, 54)
ROW_GAP = 10
EDGE_MARGIN = 5
PANEL_FRACTION = 0.25

LABEL_FONT_SIZE = 22
LOADING_FONT_SIZE = 32
BUTTON_FONT_SIZE = 22

GAME_NAME = "Game Name"
LOADING_TEXT = "Loading..."


class MenuAction(Enum):
    """What a main-menu button does when released."""

    PLAY = auto()
    EXIT = auto()


@dataclass
class UiElement:
    """A rectangle on screen with an optional fill, text, image and action."""

    rect: pygame.Rect
    color: Color | None = None
    text: str = ""
    font_size: int = 0
    text_color: Color = WHITE
    action: MenuAction | None = None
    image: bool = False

    def contains(self, pos: tuple[float, float]) -> bool:
        return bool(self.rect.collidepoint(pos))


def _text_box(text: str, font_size: int) -> tuple[int, int]:
    """Rough size of a line of text at a given font size."""
    return math.ceil(len(text) * font_size * 0.6), math.ceil(font_size * 1.2)


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"screen size must be positive, got {width}x{height}")


def boot_screen(width: int, height: int) -> list[UiElement]:
    """Elements of the loading screen: a corner label and a centred message."""
    _check_size(width, height)
    label_w, label_h = _text_box(GAME_NAME, LABEL_FONT_SIZE)
    label = UiElement(
        rect=pygame.Rect(
            width - EDGE_MARGIN - label_w, height - EDGE_MARGIN - label_h, label_w, label_h
        ),
        text=GAME_NAME,
        font_size=LABEL_FONT_SIZE,
    )
    load_w, load_h = _text_box(LOADING_TEXT, LOADING_FONT_SIZE)
    loading_rect = pygame.Rect(0, 0, load_w, load_h)
    loading_rect.center = (width // 2, height // 2)
    loading = UiElement(rect=loading_rect, text=LOADING_TEXT, font_size=LOADING_FONT_SIZE)
    return [label, loading]


def main_menu(width: int, height: int) -> list[UiElement]:
    """Elements of the main menu, back to front.

    A full-screen background image sits under a panel on the right quarter
    of the screen holding PLAY and EXIT buttons stacked in its middle.
    """
    _check_size(width, height)
    full = pygame.Rect(0, 0, width, height)
    panel_w = int(width * PANEL_FRACTION)
    panel = pygame.Rect(width - panel_w, 0, panel_w, height)

    button_w, button_h = BUTTON_SIZE
    labels = [("PLAY", MenuAction.PLAY), ("EXIT", MenuAction.EXIT)]
    stack_h = len(labels) * button_h + (len(labels) - 1) * ROW_GAP
    top = panel.top + (panel.height - stack_h) // 2
    left = panel.left + (panel.width - button_w) // 2

    elements = [
        UiElement(rect=full.copy(), color=BLACK),
        UiElement(rect=full.copy(), image=True),
        UiElement(rect=panel, color=PANEL_COLOR),
    ]
    for row, (text, action) in enumerate(labels):
        elements.append(
            UiElement(
                rect=pygame.Rect(left, top + row * (button_h + ROW_GAP), button_w, button_h),
                color=BUTTON_COLOR,
                text=text,
                font_size=BUTTON_FONT_SIZE,
                text_color=BUTTON_TEXT_COLOR,
                action=action,
            )
        )
    return elements


def element_at(
    elements: Sequence[UiElement], pos: tuple[float, float]
) -> UiElement | None:
    """Return the front-most element with an action under ``pos``, if any."""
    return next(
        (e for e in reversed(elements) if e.action is not None and e.contains(pos)),
        None,
    )


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def draw_elements(
    surface: pygame.Surface,
    elements: Iterable[UiElement],
    background: pygame.Surface | None,
) -> None:
    """Paint elements onto ``surface`` in order; image slots show ``background``."""
    if not pygame.font.get_init():
        pygame.font.init()
    for element in elements:
        if element.image:
            if background is not None:
                scaled = pygame.transform.scale(background, element.rect.size)
                surface.blit(scaled, element.rect.topleft)
        elif element.color is not None:
            surface.fill(element.color, element.rect)
        if element.text:
            rendered = _font(element.font_size).render(element.text, True, element.text_color)
            surface.blit(rendered, rendered.get_rect(center=element.rect.center))