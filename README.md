# devlife

A two-player board game played in the terminal. Each player is a computer
science student rolling dice along a snaking board, collecting money,
power-ups and life events on the way to a career. When both players reach the
last tile, the money each one holds decides their ending, from "In Debt" up to
"CEO".

## Installing

```
pip install .
```

## Playing

```
devlife
```

Without options the game asks how it should be played:

1. two people at the same keyboard,
2. one person against the computer (the second player is named `CPU`),
3. the computer against itself for a number of games.

Player names must both be given, must differ, and player 1 may not be named
`CPU` (in any letter case); player 2 may not be either, unless playing against
the computer.

The choices can also be given on the command line:

| Option                | Meaning                                              |
|-----------------------|------------------------------------------------------|
| `--mode MODE`         | `two`, `cpu` or `all-cpu`                            |
| `--games N`           | number of games in `all-cpu` mode (at least 1)       |
| `--player1 NAME`      | name of player 1                                     |
| `--player2 NAME`      | name of player 2 (not used in `cpu` mode)            |
| `--seed N`            | seed for the dice, for repeatable games              |
| `--leaderboard FILE`  | leaderboard CSV file (default `leaderboard.csv`)     |

On a human player's turn, type one of these and press Enter:

- `r` (or just Enter) – roll the die and move,
- `p` – list up to three held power-ups and use one,
- `s` – buy something in the shop,
- `l` – show the leaderboard,
- `t` – show how to play,
- `q` – quit.

After each roll the board is printed: `1` and `2` mark the players (`*` when
both share a cell), `.` is an empty tile, `$` money, `S` super money, `P`
power-up, `>` move forward, `<` move backward, `L` life event, and `#` a cell
off the path. Computer players roll on their own and, half the time, first use
a random power-up they hold.

When a single game ends, each player's ending is printed. In an all-CPU run of
more than one game, a summary line and a text bar graph of the wins are
printed after every game instead.

## The board

The board is a grid of 11 rows by 13 columns. The path runs right along the
first row, drops down one cell at the right edge, runs left along the next
played row, drops at the left edge, and so on to the bottom. A roll never
carries a player past the last tile; reaching it finishes that player.

| Tile          | Effect                                                        |
|---------------|---------------------------------------------------------------|
| Empty         | Nothing happens.                                              |
| Money         | Earn $100 times your income percentage.                       |
| Super money   | A jackpot of $10000, $25000 or $50000.                        |
| Power-up      | Gain a random power-up.                                       |
| Move forward  | A lucky event; move 1 to 5 spaces ahead, sometimes with cash. |
| Move backward | A bad break; move 1 to 5 spaces back, often losing money.     |
| Life event    | A die settles an interview, exam, internship and more.        |

When a tile moves a player, the tile they land on takes effect too.

## Power-ups

- **Job Promotion** – move 3 spaces and gain +50% income.
- **Bank Account Hack** – take 30% of your opponent's cash, or add $3000 to
  their debt if they have none.
- **Time Freeze** – your opponent's next turn is skipped.
- **Speed Boost** – move 6 spaces.
- **Energy Drink** – gain $1000.

## Shop

| Item      | Cost    | What you get                                       |
|-----------|---------|----------------------------------------------------|
| `move`    | $1000   | a Job Promotion power-up                           |
| `steal`   | $20000  | a Bank Account Hack power-up                       |
| `money`   | $20000  | an Energy Drink power-up                           |
| `lottery` | $3000   | a prize of $500, $1500, $3000 or $10000            |
| `store`   | $85000  | +500% income                                       |

## Leaderboard

At the end of a single game, each player not named `CPU` has their money added
to their running total in the leaderboard file. The leaderboard shows the top
ten totals, richest first.

## Using it as a library

The game logic can be driven without the terminal front end. A player's
notifier, if given, is called with the player and each message.

```python
import random

from devlife.game import Game
from devlife.gamelogic import Player

messages = []
notify = lambda player, message: messages.append(message)
p1 = Player("CPU", notify)
p2 = Player("CPU", notify)
game = Game(p1, p2, 3, random.Random(7), None)
while not game.over:
    game.ai_turn()
print(game.player1_wins, game.player2_wins)
```

For human players, `Game.take_turn(roll)` plays the current player's turn with
a given roll and `Game.roll_dice()` rolls one. Other pieces:

- `devlife.board.Board` – the tile grid, its path and `render()` for the text
  view; `build_path(rows, cols)` gives the path order.
- `devlife.tiles` – the tile classes and `create_tile(tile_type)`.
- `devlife.shop.buy(player, item, rng)` – buy a `ShopItem`.
- `devlife.endings.ending_for(money)` – the ending text for an amount of money.
- `devlife.leaderboard` – `load_totals`, `add_earnings`, `top_entries` and
  `format_leaderboard` for the CSV file.
- `devlife.results` – `results_summary` and `bar_graph` for multi-game results.

## What it does not do

There is no graphical window or animation: the game is played entirely as text
in the terminal, and messages are printed rather than shown in pop-ups.