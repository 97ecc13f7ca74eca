# chunkrunner

A small side-scrolling endless runner. The level is a random chain of 100
hand-made map chunks; your runner moves right on its own and you jump over
gaps and onto platforms. If you fall to the bottom of the screen, the run is
over and the game-over screen shows your final score.

## Installing

```
pip install .
```

This pulls in `pygame`.

## Playing

```
chunkrunner
```

Options:

- `--assets DIR`: directory holding the images and font (default `assets`).
- `--scale N`: whole-number window scale, at least 1 (default 3).

The game draws at 384×224 and scales that up by `--scale` in the window.

The game looks in the assets directory for the map chunks (`map1.png` to
`map8.png`), `idle.png`, `den.png`, `pause.png`, `gameover.png`,
`coin.png`, `apple.png`, `carrot.png` and `tomato.png`, and for the font
`arial.ttf`. Images that cannot be loaded are reported on standard error
and are simply not drawn; if the font is missing, pygame's default font is
used.

Controls:

- **Space**: jump. While flying, holding it makes you rise; letting go
  makes you sink slowly.
- **Escape**: pause.
- **Mouse**: click the buttons on the menu (play, exit), pause (resume,
  main menu) and game-over (main menu, exit) screens.

Pick-ups:

| Item   | Effect                                      |
|--------|---------------------------------------------|
| coin   | +1 score                                    |
| apple  | +3 score                                    |
| carrot | invincible for 5 seconds (you can't fall)   |
| tomato | fly for 4 seconds                           |

## What it does not include

The package ships no images or font. You need to supply the files listed
above in the assets directory; without them the screens stay black apart
from the text. There is no sound, and scores are not saved between runs.

## Using the pieces

The package also works as a library:

- `chunkrunner.collision`: `check_collision`, `Obstacle`, `GameObject`
- `chunkrunner.state_machine`: `GameState`, `GameStateMachine`
- `chunkrunner.input`: `InputHandler`, `MouseButton`
- `chunkrunner.button`: `Button`, `ButtonState`
- `chunkrunner.textures`: `TextureManager`, `Flip`, `scroll_slices`
- `chunkrunner.level`: `default_obstacles`, `default_collectibles`,
  `generate_run`, `Collectible`, `CollectibleKind`
- `chunkrunner.player`: `Player`
- `chunkrunner.states`: `MenuState`, `PlayState`, `PauseState`, `GameOverState`
- `chunkrunner.game`: `Game`, `load_assets`, `main`

For example, this builds a level and runs the player physics without opening
a window:

```python
import random

from chunkrunner.level import default_obstacles, generate_run
from chunkrunner.player import Player

chunks, collectibles = generate_run(random.Random(1), 100)
player = Player(0, 120, 20, 40)
chunk_index = player.step(1 / 60, default_obstacles(), chunks, jump_held=False)
```

`scroll_slices(chunk_count, camera_x, chunk_width)` tells you which two
chunks are on screen at a camera position and how far into the first one
the left edge lies.

## Tests

```
pip install .[test]
pytest
```