# eggshot

A small first-person game about an egg standing on a green field. The package
holds a scene simulation (an egg player on a ground plane, a sun light, and a
camera rig with a grey gun model attached to the player) together with the
systems that move it: keyboard walking, gravity, jumping and mouse look. A
`pygame` window shows the title menu.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
eggshot
```

This opens a 1280×720 window titled `eggshot` that draws the title menu: the
word `EGGSHOT` and a grey `Play` button on a black background. The title font
is loaded from `fonts/FiraSans-Bold.ttf` relative to the current directory if
that file exists, and otherwise from pygame's default font. Closing the window
ends the program.

On start the mouse cursor is hidden and grabbed. Each frame (capped at 60 per
second) the keyboard and mouse input is fed into the simulation:

| Input        | Effect on the simulation                                   |
|--------------|------------------------------------------------------------|
| `W` / `S`    | move forward / backward                                    |
| `A` / `D`    | strafe left / right                                        |
| `Space`      | jump (only while standing on the ground)                   |
| Mouse        | yaw turns the egg, pitch tilts the camera rig              |
| `Escape`     | show and release the mouse cursor                          |

Movement is at 5 units per second, relative to the way the egg is facing, and
only in the horizontal plane. Gravity (−9.8) pulls the egg back down to the
ground height of 0.5 after a jump (jump speed 6.5). Vertical look is limited to
just under ±90° so the camera never flips over.

## What it does not do

- The window only ever draws the title menu. The 3D scene — field, egg, light,
  camera and gun — exists only as data and is never rendered.
- The `Play` button cannot be clicked, and `Game.state` stays
  `AppState.MENU`; nothing switches it to `AppState.IN_GAME`.
- There is no shooting: the gun is a model attached to the camera and nothing
  more.
- There are no command-line options besides `--help`.

## Using it as a library

The simulation runs without a window, so you can drive it from your own code:

```python
from eggshot.app import build_app

game = build_app()
game.update(1 / 60, pressed={"w"}, just_pressed={"space"}, mouse_deltas=[(4.0, 0.0)])
print(game.world.walk())
```

Key names are lower-case strings as `pygame.key.name` gives them: `"w"`,
`"a"`, `"s"`, `"d"`, `"space"`, `"escape"`. Mouse deltas are `(dx, dy)` pairs
in pixels.

- `eggshot.app.build_app()` returns a `Game` with the scene, the menu, a
  hidden and grabbed `Cursor` and fresh `LookAngles`. `Game.update()` runs, in
  order, movement, gravity, jumping, camera-rig spawning, mouse look and cursor
  release. `eggshot.app.main()` is the window loop behind the `eggshot`
  command.
- `eggshot.world.spawn_scene()` builds a `World` of `Entity` trees (ground,
  player, light). `World.spawn_camera()` attaches the camera root, camera and
  gun to the single player, once; `World.walk()` and `Entity.walk()` iterate
  entities depth first.
- `eggshot.movement` holds `player_movement_input`, `apply_gravity` and
  `player_jump`.
- `eggshot.mouse_look` holds `mouse_look_system`, `setup_cursor` and
  `unlock_cursor`, and the `LookAngles` and `Cursor` dataclasses.
- `eggshot.menu.spawn_menu()` builds the title menu as a tree of `MenuNode`s.
- `eggshot.state.AppState` names the screens, `MENU` and `IN_GAME`.
- `eggshot.geometry` provides `Vec3`, `Quat`, `Transform` (with
  `looking_at`) and `Velocity`.