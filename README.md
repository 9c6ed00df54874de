# snakegame

The classic snake game, played in your terminal.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. It uses the `curses` module, which is present on Linux and macOS. On Windows the package cannot be imported unless a curses implementation is installed separately.

## Playing

```
snakegame
```

The game opens with a settings menu:

- **Speed**: Slow, Normal or Fast (a pause of 0.15, 0.1 or 0.06 seconds per step)
- **Head**: the character for the snake's head (`@`, `%`, `O`)
- **Fruit**: the character for the food (`*`, `+`, `X`)
- **Color Theme**: Green/Magenta, Red/Yellow or Cyan/Blue (snake/fruit)
- **Obstacles**: None, Few (10 placements) or Many (20 placements)

Use Up and Down to pick a setting and Left and Right to change its value. Press Enter to start the game, or ESC to quit.

The board is 40 columns by 20 rows with a `#` border. Obstacles are drawn as `X` and are placed at random, never on the first fruit. During the game, steer the snake with the arrow keys. The snake cannot reverse straight back onto itself. The game ends when the snake hits the wall, an obstacle or its own body.

Each fruit the snake eats makes it one segment longer, up to 100 segments, and adds to your score:

| Obstacles | Points per fruit |
|-----------|------------------|
| None      | 10               |
| Few       | 20               |
| Many      | 30               |

## Leaderboard

When the game ends, you are asked for your name. If you leave it empty, the name `unknown` is used; longer names are cut to 31 characters. The ten best scores are kept in `leaderboard.txt` in the current directory, one `name score` pair per line, highest first, and the table is shown after each game. A missing or unwritable file is silently ignored.

## Using it from Python

The game state and the leaderboard can be driven without opening a terminal screen:

```python
import random
from snakegame.board import Direction, Game
from snakegame.leaderboard import Leaderboard

game = Game(20, 40, 1, random.Random(0))
game.turn(Direction.UP)
game.update()
print(game.score, game.game_over)

board = Leaderboard("scores.txt")
board.load()
board.add("alice", game.score)
print("\n".join(board.format_lines()))
```

`snakegame.board` also offers `obstacle_placements(level)` and `score_gain(level)`, and `Game.handle_key(key)` to turn by a curses arrow-key code. `snakegame.menu.Menu` holds the menu state: `handle_key(key)` returns `True` to start, `False` to quit and `None` otherwise, and `settings()` returns the chosen `Settings`.