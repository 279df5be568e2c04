# bevymove

A small 2D game built on pygame. It opens on a loading screen while its image
loads. It then shows a main menu with **PLAY** and **EXIT** buttons. PLAY takes
you to a scene with a blue circle that you steer with the arrow keys. The circle
always stays inside the window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
bevymove
bevymove --assets path/to/assets
```

`--assets` names the directory that holds `background.png`. The default is
`assets`, relative to the current directory. The image is scaled to fill the
main menu's background.

- Release the left mouse button over **PLAY** to start the game.
- Release it over **EXIT** to close the program. Closing the window also quits.
- The arrow keys move the circle. The circle has a radius of 30 pixels. Each
  frame it moves 5 pixels along each axis whose key is held, and opposite keys
  cancel each other out.
- The window keeps the circle's edge inside its borders.

The window opens at 600×600. It becomes 800×600 on the loading screen and
1024×768 on the main menu, and it keeps that size in the game. The title is
"Bevy Circle Example". An FPS counter shows in the top-left corner and refreshes
every 100 ms. The frame rate is capped at 60.

## What it does not do

- If `background.png` is missing or cannot be read, the game moves to its error
  state. That screen is blank: it shows no message and has no buttons. Close the
  window to quit.
- `AppState.PAUSED` exists, but nothing enters it. There is no pause screen.

## Using it from code

The pieces can also be used on their own:

- `bevymove.states.AppState` lists the states. `bevymove.states.StateMachine`
  runs callbacks registered with `on_enter` and `on_exit`. `start()` enters the
  initial state, `set()` requests a change, and `apply()` carries it out.
- `bevymove.player`:
  - `spawn_player()` returns a `Player` at the origin.
  - `player_input(player, pressed)` sets the player's direction from a
    collection holding any of `"left"`, `"right"`, `"up"` and `"down"`.
  - `player_movement(player, window_width, window_height)` moves the player one
    step and clamps it to the window. It raises `ValueError` if the window is
    too small for the circle.
- `bevymove.window.window_size_for(state)` returns the window size for a state,
  or `None` if the state keeps the current size.
- `bevymove.ui`:
  - `boot_screen(width, height)` and `main_menu(width, height)` build lists of
    `UiElement`. They raise `ValueError` for a size that is not positive.
  - `element_at(elements, pos)` returns the front-most element with a
    `MenuAction` under a point.
  - `draw_elements(surface, elements, background)` paints a layout onto a
    pygame surface.
- `bevymove.app`:
  - `Game` holds a whole session without needing a display. `boot()` enters the
    loading state. `update(pressed)` advances one frame. `click(pos)` handles a
    button release. `draw(surface)` renders the current state.
  - `load_background(asset_dir)` loads the menu image. It raises
    `AssetLoadError` if the image is missing or unreadable.
  - `main(argv=None)` runs the game window.