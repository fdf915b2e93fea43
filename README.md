# dotstrike

A small two-player board game played on a triangle of 21 numbered dots,
arranged in rows of six, five, four, three, two and one, numbered 0 to 20
row by row.

## Rules

Players take turns, red first. On a turn a player picks two dots, and
every dot numbered from one to the other, both included, is struck out.
Picking the same dot twice strikes out that dot alone. The computer
players always pick two dots in the same row; a human may pick any two,
but a stroke is only drawn on screen when both ends lie in the same row.

A stroke that crosses a dot already struck out is a collision, and it
ends the game. Once every dot is struck out, the player who made the last
stroke loses and the other player wins.

## Modes

- **human2human**: both players click dots.
- **human2random** (the default): you play red; blue picks a random stroke
  within one row, trying up to 1001 times to find one that crosses no
  struck-out dot.
- **random2random**: both sides play such random strokes while you watch,
  one stroke per second after the first.

## Installing and running

```
pip install .
dotstrike
```

Options:

- `--mode {human2human,human2random,random2random}`: who plays red and blue.
- `--seed N`: seed for the computer players' random moves.

Click a dot to begin a stroke and click a second dot to finish it. The
window shows the winner ("RED WON" or "BLUE WON", also printed to the
terminal), or "COLLISION" if a stroke ran over a dot that was already
taken. Close the window to quit.

## Using it as a library

The game rules have no dependency on the window and can be driven
directly:

```python
import random
from dotstrike.game import Game, Mode

game = Game(Mode.HUMAN_VS_HUMAN, random.Random(0))
game.click(0)
game.click(5)   # red strikes the whole first row
print(game.board.erased_count())   # 6
print(game.is_over(), game.winner())   # False None
```

`Game.step()` lets a computer player move when it is its turn.
`dotstrike.board.Board` holds which dots are struck out (`strike`,
`is_free`, `erased_count`, `is_full`), and
`dotstrike.moves.random_free_pair` picks a random stroke that avoids
struck-out dots, returning the last pair tried if it finds none.

## Tests

```
pip install .[test]
pytest
```