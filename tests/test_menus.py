from castcaper.framebuffer import FrameBuffer
from castcaper.keyboard import Keyboard
from castcaper.menus import (
    SELECTED,
    VK_DOWN,
    VK_ESCAPE,
    VK_RETURN,
    VK_UP,
    WHITE,
    TitleScreen,
    TitleSubState,
)
from castcaper.renderer import Renderer

BLOCK_FONT = [[0xFF] * 8 for _ in range(96)]


def make_screen(sub_state=TitleSubState.SPLASH):
    fb = FrameBuffer(1020, 540)
    renderer = Renderer(fb, BLOCK_FONT)
    keyboard = Keyboard()
    calls = []
    screen = TitleScreen(
        renderer,
        keyboard,
        lambda: calls.append("new"),
        lambda: calls.append("quit"),
        sub_state,
    )
    return screen, keyboard, fb, calls


def press(keyboard, screen, code):
    keyboard.key_down(code)
    screen.update(0.016)
    keyboard.update()
    keyboard.key_up(code)
    keyboard.update()


def colours_in_rows(fb, top, bottom):
    return {fb.pixels[y * fb.width + x] for y in range(top, bottom) for x in range(fb.width)}


def test_splash_enter_goes_to_menu():
    screen, kb, fb, calls = make_screen()
    fb.clear(0x123456)
    press(kb, screen, VK_RETURN)
    assert screen.sub_state is TitleSubState.MENU
    assert screen.menu_selection == 0
    assert set(fb.pixels) == {0}
    assert calls == []


def test_menu_selection_wraps():
    screen, kb, _, _ = make_screen(TitleSubState.MENU)
    press(kb, screen, VK_UP)
    assert screen.menu_selection == 1
    press(kb, screen, VK_DOWN)
    assert screen.menu_selection == 0


def test_enter_on_new_game_calls_callback():
    screen, kb, _, calls = make_screen(TitleSubState.MENU)
    press(kb, screen, VK_RETURN)
    assert calls == ["new"]


def test_enter_on_exit_quits():
    screen, kb, _, calls = make_screen(TitleSubState.MENU)
    press(kb, screen, VK_DOWN)
    press(kb, screen, VK_RETURN)
    assert calls == ["quit"]


def test_held_key_acts_once():
    screen, kb, _, _ = make_screen(TitleSubState.MENU)
    kb.key_down(VK_DOWN)
    screen.update(0.016)
    kb.update()
    screen.update(0.016)
    assert screen.menu_selection == 1


def test_menu_render_highlights_selection():
    screen, kb, fb, _ = make_screen(TitleSubState.MENU)
    screen.render()
    assert screen.rendered
    assert SELECTED in colours_in_rows(fb, 255, 271)
    assert SELECTED not in colours_in_rows(fb, 280, 296)
    press(kb, screen, VK_DOWN)
    assert not screen.rendered
    screen.render()
    assert SELECTED not in colours_in_rows(fb, 255, 271)
    assert SELECTED in colours_in_rows(fb, 280, 296)
    assert WHITE in colours_in_rows(fb, 255, 271)


def test_render_only_once_until_changed():
    screen, _, fb, _ = make_screen()
    screen.render()
    fb.clear(0)
    screen.render()
    assert set(fb.pixels) == {0}


def test_options_back_and_escape_return_to_menu():
    screen, kb, _, _ = make_screen(TitleSubState.OPTIONS)
    press(kb, screen, VK_UP)
    assert screen.options_selection == 2
    press(kb, screen, VK_RETURN)
    assert screen.sub_state is TitleSubState.MENU

    screen, kb, _, _ = make_screen(TitleSubState.OPTIONS)
    press(kb, screen, VK_ESCAPE)
    assert screen.sub_state is TitleSubState.MENU


def test_destroyed_screen_ignores_input():
    screen, kb, _, calls = make_screen(TitleSubState.MENU)
    screen.destroy()
    press(kb, screen, VK_RETURN)
    assert calls == []
    assert not screen.active