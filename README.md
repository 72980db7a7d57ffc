# sidescroller

A small side-scrolling shooter built on pygame. The window is 800×600. The
game opens on a menu screen that shows the word "Hello" and a green circle.
Click inside the area from x 400 to 515 and y 310 to 350 to start playing.
During play you steer a character who can walk, sprint and shoot.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
sidescroller
```

The game loads its assets from paths relative to the working directory:

- `src/font/arial.ttf`
- `src/entity/background.png`
- `src/entity/player_idle.png`
- `src/entity/player_walk.png`
- `src/entity/player_sprint.png`
- `src/entity/player_shot.png`

If the font is missing, pygame's default font is used instead. If the
background is missing, the play screen stays black. If a player image is
missing, the player is drawn as a white rectangle.

### Controls

| Input              | Action                                              |
|--------------------|-----------------------------------------------------|
| `D`                | walk right                                          |
| `A`                | walk left                                           |
| Left `Shift`       | sprint, at three times walking speed                |
| `Space`            | switch to the jump state                            |
| Left mouse button  | fire; the player cannot move until the shot is done |

The player cannot walk past the edges of the field.

A shot plays a firing animation. When the animation ends, a green bullet
appears. The bullet flies left if `A` is held at that moment and right
otherwise. It is removed once it leaves the screen.

The seconds spent in play are shown in the top-left corner. Close the window
to quit.

## What the game does not do

- There are no enemies or targets. Bullets do not hit anything.
- Space does not make the player jump. It only changes the player's state.
- Health exists on entities, but nothing in play deals damage or shows it.
- `Application.pause` is an empty screen hook, and no input opens it.

## Using the pieces

The game objects work without a window:

- `sidescroller.entity`: `Entity`, `EntityState`, `Sprite` and
  `TextureCoords`. `Entity` provides:
  - `take_damage`, which returns the remaining health, floored at 0;
  - `set_speed`, where 1 means walk and 2 means sprint;
  - `is_sprint`;
  - `next_rect`, which returns the frame coordinates from an index on,
    together with the next index.
- `sidescroller.player`: `Player` and `Controls`. `Controls` is a frozen
  snapshot of the held inputs (`sprint`, `right`, `left`, `jump`, `fire`),
  and `Player.update(tick, controls)` consumes it. `Player.bullets` holds the
  bullets in flight.
- `sidescroller.bullet`: `Bullet`. It moves along the x axis by
  `speed * tick`, and sets `expired` when it leaves the screen.
- `sidescroller.utility`: `Utility`, the base class for items with `damage`
  and `speed`. It also holds the screen size constants.
- `sidescroller.application`: `Application`, `GameState` and `main`. These
  open the window and run the menu and play loops.

## Running the tests

```
pip install ".[test]"
pytest
```