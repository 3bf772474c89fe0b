# slipfloor

A small top-down arcade ship duel. You steer a ship across a slippery floor:
turn left and right, thrust forwards or backwards, and let momentum carry you,
since speed only bleeds away slowly. An enemy ship turns to track you, closes in
when you are inside its field of view, and fires when you are close and lined
up. Ships push each other apart instead of overlapping.

## Installing

```
pip install .
```

This pulls in pygame.

## Playing

```
slipfloor
```

By default the game opens full screen. For a window titled "Slip Floor" with
the frame rate shown in the top-left corner, run:

```
slipfloor --debug
```

Controls:

| Key                      | Action               |
|--------------------------|----------------------|
| Left / keypad 4          | Turn left            |
| Right / keypad 6         | Turn right           |
| Up / keypad 8            | Accelerate forwards  |
| Down / keypad 2          | Accelerate backwards |
| Space                    | Fire                 |
| Escape or closing window | Quit                 |

The game updates at a fixed 60 frames per second on an 800×600 play field
centred in a 1280×720 display. The command exits with status 0 when the game
ends normally and -1 if the display cannot be opened.

Ship and bullet images are loaded from `Resources/Textures/Player.png`,
`Resources/Textures/Enemy.png` and `Resources/Textures/Bullet.png`, relative to
the working directory. An image that cannot be loaded is simply not drawn; the
game still runs.

## What the game does not do

There is a single play scene and nothing around it: no title screen, no score,
no lives and no game over. Bullets fly until they leave the play field but do
not hit or damage either ship; the only contact between objects is the two
ships bumping apart.

## Using the pieces

The game logic can be driven without opening a window:

```python
from slipfloor.gamemath import Vector2D, length, normalize
from slipfloor.collision import BoundingCircle, is_circle_colliding, resolve_overlap
from slipfloor.bullet import BulletManager

a = BoundingCircle(Vector2D(0.0, 0.0), 16.0)
b = BoundingCircle(Vector2D(20.0, 0.0), 16.0)
if is_circle_colliding(a, b):
    resolve_overlap(a, b)   # pushes both circles apart equally until they touch

bullets = BulletManager()
bullets.initialize(10)
bullets.shoot_bullet(Vector2D(400.0, 300.0), 0.0)   # returns the bullet, or None if all are in flight
bullets.update()
print([b.position for b in bullets])               # iterating yields bullets in flight
```

Other modules:

- `slipfloor.gamemath`: `Vector2D` with `+`, `-`, `*` and `/`, plus `dot`,
  `cross`, `length`, `normalize`, `to_degrees`, `to_radians`,
  `normalize_angle_pi` and `normalize_angle_2pi`.
- `slipfloor.screen`: display and play-field sizes and `viewport_rect()`, where
  the play field sits in the display.
- `slipfloor.frametimer`: `FrameTimer`, fixed (`FrameTimer(60)`) or variable
  (`FrameTimer()`) frame pacing with `update()`, `is_update_frame`,
  `elapsed_time` and `frame_rate`; a custom microsecond `clock` can be passed in.
- `slipfloor.actors`: `Player`, `Enemy` and the `PadInput` bit flags they read.
- `slipfloor.scene`: `GamePlayScene` and `Game`, which tracks pad input, switches
  scenes with `request_scene_change` and renders the play field onto a surface.
- `slipfloor.gamelib`: the `Colors` palette as 0xAARRGGBB values, `to_rgba`,
  `exit_game()` (raises `ExitGame`) and `output_debug_string` for printf-style
  messages to standard error.
- `slipfloor.app`: `main`, `read_pad_state` and `draw_frame_rate`.

## Running the tests

```
pip install ".[test]"
pytest
```