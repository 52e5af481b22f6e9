# castcaper

Building blocks of a small party-based dungeon crawler: a software
framebuffer with drawing primitives, keyboard state tracking, a state
manager with a title screen, and the rules behind turn-based combat and
loot handling. Nothing is tied to a window system, so every piece can be
driven and inspected from plain Python.

## Modules

| Module | What it holds |
| --- | --- |
| `castcaper.framebuffer` | `FrameBuffer`: a fixed-size grid of 32-bit colours with `clear`, `get` and `set`. `get` and `set` raise `IndexError` outside the frame. |
| `castcaper.renderer` | `Renderer`: lines, thick lines, rectangles, progress bars, 8x8 and 32x32 bitmaps, paletted sprites, text (plain, centred, word-wrapped) and grid lines drawn into a `FrameBuffer`. Drawing outside the frame is clipped. `wrap_lines` splits text the way wrapped drawing does. |
| `castcaper.keyboard` | `Keyboard`: tracks which of the 256 key codes are held, and which went down since the last `update`. |
| `castcaper.state_manager` | `GameState` (the protocol a screen follows) and `StateManager`, which keeps one current state and forwards `update`, `render` and `destroy_current` to it. |
| `castcaper.menus` | `TitleScreen`: the splash screen, the main menu ("New Game", "Exit") and an options menu, starting a game or quitting through callbacks. |
| `castcaper.turn_order` | `Combatant` and `TurnOrder`: haste-based action cooldowns, the global cycle bar and picking who acts next. |
| `castcaper.layout` | `enemy_position`, `ambush_message` with `EnemyNames`, `layout_status_effects` with `StatusEffect`, and the target helpers `cycle_target` and `first_alive`. |
| `castcaper.stats` | `combat_stats` turns `MemberStats` and `BaseStats` into `CombatStats`; `regenerate_secondary` for `SecondaryType` resources; `tick_cooldowns`. |
| `castcaper.loot` | `MainStat`, `ItemStats`, `party_indices`, the panel text from `item_stat_lines` and `comparison_lines`, and `LootPile` for working through a drop. |

## Examples

Keyboard state follows a "held" and "just pressed" model. Call `update`
once per frame, after the frame's game logic has run:

```python
from castcaper.keyboard import Keyboard

keys = Keyboard()
keys.key_down(0x0D)           # Enter goes down
assert keys.is_pressed(0x0D)
assert keys.just_pressed(0x0D)
keys.update()                 # end of frame
assert not keys.just_pressed(0x0D)
```

Drawing goes through a `Renderer` bound to a `FrameBuffer` and an 8x8
font. The font is a sequence of 96 glyphs, one per character from
space (32) to 127, each glyph eight row bytes with the least significant
bit as the leftmost pixel:

```python
from castcaper.framebuffer import FrameBuffer
from castcaper.renderer import Renderer

frame = FrameBuffer(1020, 540)
renderer = Renderer(frame, font)
renderer.clear(0x000000)
renderer.draw_colour_rectangle(10, 10, 40, 20, 0xFF0000)
renderer.draw_progress_bar(10, 40, 128, 14, 75.0, 0xFF0000, 0x600000)
renderer.draw_string_centered("YOU WIN!", 18, 564, 200, 0x3EFF11, 6)
```

Progress values are percentages and are clamped to the range 0-100.

Turn order is driven by haste; pass a seeded `random.Random` for
repeatable rolls. `start` returns the index of whoever acts first, or
`None` when the global cycle bar comes first:

```python
import random
from castcaper.turn_order import Combatant, TurnOrder

order = TurnOrder(
    [Combatant(haste=10.0), Combatant(haste=12.0), Combatant(haste=8.0, enemy=True)],
    random.Random(1),
)
first = order.start()
```

Screen layout and messages:

```python
from castcaper.layout import EnemyNames, ambush_message, enemy_position

assert enemy_position(0, 1) == (222, 100)
names = [EnemyNames("rat", "rats"), EnemyNames("imp", "imps"), EnemyNames("bat", "bats")]
assert ambush_message([2, 0, 1], names) == "2 rats, and a bat"
```

Loot goes to one of two party slots per main stat:

```python
from castcaper.loot import LootPile, MainStat, party_indices

assert party_indices(MainStat.STR) == (0, 3)
pile = LootPile(["helm", "boots"])
pile.move_selection(1)
pile.remove(1)
assert pile.selection == 0
```

## What the package does not do

- It opens no window and plays no sound: frames live in a `FrameBuffer`
  for the caller to show, and key codes have to be fed to `Keyboard` by
  the caller.
- It has no command that launches a game, and no frame loop of its own.
- The only ready-made screen is `TitleScreen`. There is no movement or
  map screen, no combat or loot screen, no boss fight, no party or class
  data and no item generation; `turn_order`, `layout`, `stats` and `loot`
  hold the rules such screens would be built on.
- Nothing is saved to disk.

## Running the tests

Install the `test` extra and run `pytest` from the project root.