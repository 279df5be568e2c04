import pygame
import pytest

from bevymove.ui import (
    BUTTON_COLOR,
    PANEL_COLOR,
    MenuAction,
    UiElement,
    boot_screen,
    draw_elements,
    element_at,
    main_menu,
)


def _by_text(elements, text):
    return next(e for e in elements if e.text == text)


def _buttons(elements):
    return [e for e in elements if e.action is not None]


@pytest.mark.parametrize("size", [(800, 600), (1024, 768)])
def test_boot_screen_label_in_bottom_right_corner(size):
    width, height = size
    label = _by_text(boot_screen(width, height), "Game Name")
    assert label.rect.right == width - 5
    assert label.rect.bottom == height - 5
    assert label.font_size == 22


def test_boot_screen_loading_centered():
    loading = _by_text(boot_screen(800, 600), "Loading...")
    assert loading.rect.center == (400, 300)
    assert loading.font_size == 32


def test_boot_screen_has_no_actions():
    assert _buttons(boot_screen(800, 600)) == []


def test_boot_screen_rejects_empty_size():
    with pytest.raises(ValueError):
        boot_screen(0, 600)


def test_main_menu_panel_on_right_quarter():
    width, height = 1024, 768
    panel = next(e for e in main_menu(width, height) if e.color == PANEL_COLOR)
    assert panel.rect.right == width
    assert panel.rect.height == height
    assert panel.rect.width == width // 4


def test_main_menu_buttons_stack_inside_panel():
    elements = main_menu(1024, 768)
    panel = next(e for e in elements if e.color == PANEL_COLOR)
    play, exit_ = _buttons(elements)
    assert (play.text, play.action) == ("PLAY", MenuAction.PLAY)
    assert (exit_.text, exit_.action) == ("EXIT", MenuAction.EXIT)
    for button in (play, exit_):
        assert button.rect.size == (160, 54)
        assert panel.rect.contains(button.rect)
        assert button.color == BUTTON_COLOR
    assert exit_.rect.top - play.rect.bottom == 10
    assert play.rect.centerx == panel.rect.centerx


def test_main_menu_has_full_screen_image():
    images = [e for e in main_menu(640, 480) if e.image]
    assert [e.rect.size for e in images] == [(640, 480)]


def test_element_at_finds_buttons():
    elements = main_menu(1024, 768)
    play, exit_ = _buttons(elements)
    assert element_at(elements, play.rect.center) is play
    assert element_at(elements, exit_.rect.center) is exit_


def test_element_at_ignores_inert_areas():
    elements = main_menu(1024, 768)
    assert element_at(elements, (0, 0)) is None


def test_element_at_prefers_front_most():
    back = UiElement(rect=pygame.Rect(0, 0, 50, 50), action=MenuAction.EXIT)
    front = UiElement(rect=pygame.Rect(10, 10, 20, 20), action=MenuAction.PLAY)
    assert element_at([back, front], (15, 15)) is front
    assert element_at([back, front], (45, 45)) is back


def test_draw_elements_paints_panel_and_button():
    elements = main_menu(1024, 768)
    surface = pygame.Surface((1024, 768))
    draw_elements(surface, elements, None)
    panel = next(e for e in elements if e.color == PANEL_COLOR)
    play = _buttons(elements)[0]
    assert tuple(surface.get_at((panel.rect.left + 2, 2)))[:3] == PANEL_COLOR
    assert tuple(surface.get_at((play.rect.left + 2, play.rect.top + 2)))[:3] == BUTTON_COLOR


def test_draw_elements_shows_background_image():
    background = pygame.Surface((16, 9))
    background.fill((10, 200, 30))
    surface = pygame.Surface((400, 300))
    draw_elements(surface, main_menu(400, 300), background)
    assert tuple(surface.get_at((5, 5)))[:3] == (10, 200, 30)


def test_draw_elements_renders_white_text():
    elements = boot_screen(800, 600)
    surface = pygame.Surface((800, 600))
    draw_elements(surface, elements, None)
    rect = _by_text(elements, "Loading...").rect.clip(surface.get_rect())
    pixels = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    }
    assert (255, 255, 255) in pixels