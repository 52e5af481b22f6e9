"""The title screen: splash, main menu and options menu."""

from enum import IntEnum

VK_RETURN = 0x0D
VK_ESCAPE = 0x1B
VK_UP = 0x26
VK_DOWN = 0x28

WHITE = 0xFFFFFF
SELECTED = 0xFF0000
SHADOW_DARK = 0x272727
SHADOW_LIGHT = 0x6D6D6D

SCREEN_LEFT = 0
SCREEN_RIGHT = 1020

MENU_ITEMS = ("New Game", "Exit")
OPTION_ITEMS = ("Controls", "Audio", "Back")


class TitleSubState(IntEnum):
    SPLASH = 0
    MENU = 1
    OPTIONS = 2


class TitleScreen:
    """Splash screen and main menu; starts a new game or quits through callbacks."""

    def __init__(self, renderer, keyboard, on_new_game, on_quit, sub_state=TitleSubState.SPLASH):
        self.renderer = renderer
        self.keyboard = keyboard
        self.on_new_game = on_new_game
        self.on_quit = on_quit
        self.sub_state = TitleSubState(sub_state)
        self.rendered = False
        self.menu_selection = 0
        self.options_selection = 0
        self.active = True

    def _pressed(self, code):
        return self.keyboard.just_pressed(code)

    def _go_to_menu(self):
        self.renderer.clear(0)
        self.sub_state = TitleSubState.MENU
        self.rendered = False

    def update(self, delta_time):
        if not self.active:
            return
        if self.sub_state is TitleSubState.SPLASH:
            if self._pressed(VK_RETURN):
                self._go_to_menu()
                self.menu_selection = 0
        elif self.sub_state is TitleSubState.MENU:
            self._update_menu()
        else:
            self._update_options()

    def _update_menu(self):
        count = len(MENU_ITEMS)
        if self._pressed(VK_UP):
            self.menu_selection = (self.menu_selection - 1) % count
            self.rendered = False
        if self._pressed(VK_DOWN):
            self.menu_selection = (self.menu_selection + 1) % count
            self.rendered = False
        if self._pressed(VK_RETURN):
            if self.menu_selection == 0:
                self.renderer.clear(0)
                self.on_new_game()
            else:
                self.on_quit()

    def _update_options(self):
        count = len(OPTION_ITEMS)
        if self._pressed(VK_UP):
            self.options_selection = (self.options_selection - 1) % count
            self.rendered = False
        if self._pressed(VK_DOWN):
            self.options_selection = (self.options_selection + 1) % count
            self.rendered = False
        if self._pressed(VK_RETURN) and self.options_selection == 2:
            self._go_to_menu()
        if self._pressed(VK_ESCAPE):
            self._go_to_menu()

    def _draw_title(self):
        draw = self.renderer.draw_string_centered
        for offset, colour in ((4, SHADOW_DARK), (2, SHADOW_LIGHT), (0, WHITE)):
            draw("Cast & Caper:", offset, SCREEN_RIGHT, 100 + offset, colour, 5)
        for offset, colour in ((4, SHADOW_DARK), (2, SHADOW_LIGHT), (0, WHITE)):
            draw("Cuthbert's Castle", offset, SCREEN_RIGHT, 170 + offset, colour, 4)

    def _draw_items(self, items, selection, top):
        for i, label in enumerate(items):
            colour = SELECTED if i == selection else WHITE
            self.renderer.draw_string_centered(label, SCREEN_LEFT, SCREEN_RIGHT, top + 25 * i, colour, 2)

    def render(self):
        if not self.active or self.rendered:
            return
        r = self.renderer
        if self.sub_state is TitleSubState.SPLASH:
            self._draw_title()
            r.draw_string_centered("Press [ENTER] to start", SCREEN_LEFT, SCREEN_RIGHT, 360, WHITE, 2)
        elif self.sub_state is TitleSubState.MENU:
            self._draw_title()
            self._draw_items(MENU_ITEMS, self.menu_selection, 255)
            r.draw_string("[ENTER] Continue", 860, 520, WHITE, 1)
        else:
            self._draw_items(OPTION_ITEMS, self.options_selection, 255)
            r.draw_string("[ENTER] Continue", 860, 520, WHITE, 1)
            r.draw_string("[ESC] Back", 30, 520, WHITE, 1)
        self.rendered = True

    def destroy(self):
        """Stop the screen from reacting to updates and renders."""
        self.active = False