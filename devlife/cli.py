"""Command-line front end: choose players, then play on the terminal."""

from __future__ import annotations

import argparse
import random
from typing import Optional

from devlife.endings import ending_for
from devlife.game import Game
from devlife.gamelogic import CPU_NAME, Player
from devlife.leaderboard import DEFAULT_PATH, add_earnings, top_entries
from devlife.results import bar_graph, results_summary
from devlife.shop import ShopItem, buy

POWER_SLOTS = 3

TUTORIAL = (
    "Click the 'Roll' button to roll the dice and move forward.\n\n"
    "Land on different tiles to gain money, power-ups, or encounter events.\n"
    "Reach the end of the board to finish the game!"
)

_MODES = {"1": "two", "2": "cpu", "3": "all-cpu"}

_COMMANDS_HELP = (
    "[r]oll (default), [p]ower-ups, [s]hop, [l]eaderboard, [t]utorial, [q]uit"
)


def validate_names(name1: str, name2: str, vs_ai: bool) -> tuple[str, str]:
    """Check two player names and return them trimmed; raise ValueError if unusable."""
    name1, name2 = name1.strip(), name2.strip()
    if not name1 or not name2:
        raise ValueError("Please enter both player names.")
    if name1 == name2:
        raise ValueError("Players must have different names.")
    if name1.upper() == CPU_NAME:
        raise ValueError("Player 1 cannot be named 'CPU'.")
    if not vs_ai and name2.upper() == CPU_NAME:
        raise ValueError(
            "Player 2 cannot be named 'CPU' unless you're playing vs AI."
        )
    return name1, name2


def _prompt(text: str) -> Optional[str]:
    try:
        return input(text)
    except EOFError:
        return None


def _print_notice(player: Player, message: str) -> None:
    print(f"[{player.name}] {message}")


def _parse_args(argv: Optional[list[str]]) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="devlife", description="A board game about a developer's career."
    )
    parser.add_argument("--mode", choices=sorted(set(_MODES.values())))
    parser.add_argument("--games", type=int, help="number of all-CPU games")
    parser.add_argument("--player1", help="name of player 1")
    parser.add_argument("--player2", help="name of player 2")
    parser.add_argument("--seed", type=int, help="seed for the dice")
    parser.add_argument("--leaderboard", default=DEFAULT_PATH, help="leaderboard CSV file")
    return parser, parser.parse_args(argv)


def _choose_mode() -> Optional[str]:
    while True:
        answer = _prompt("1) Two players  2) Versus CPU  3) All CPU: ")
        if answer is None:
            return None
        mode = _MODES.get(answer.strip())
        if mode:
            return mode
        print("Choose 1, 2 or 3.")


def _choose_games() -> Optional[int]:
    while True:
        answer = _prompt("Number of games: ")
        if answer is None:
            return None
        try:
            games = int(answer)
        except ValueError:
            games = 0
        if games >= 1:
            return games
        print("Enter a positive whole number.")


def _choose_names(vs_ai: bool) -> Optional[tuple[str, str]]:
    while True:
        name1 = _prompt("Player 1 name: ")
        if name1 is None:
            return None
        if vs_ai:
            name2: Optional[str] = CPU_NAME
        else:
            name2 = _prompt("Player 2 name: ")
            if name2 is None:
                return None
        try:
            return validate_names(name1, name2, vs_ai)
        except ValueError as error:
            print(error)


def _status(game: Game) -> str:
    lines = [game.board.render({"1": game.player1.position, "2": game.player2.position})]
    for number, player in enumerate(game.players, start=1):
        lines.append(
            f"{number}) {player.name}: ${player.money}  "
            f"income {player.income_percent:g}%  position {player.position}"
        )
    return "\n".join(lines)


def _power_menu(player: Player) -> None:
    slots = [power.name for power in player.powerups[:POWER_SLOTS]]
    slots += ["None"] * (POWER_SLOTS - len(slots))
    for number, name in enumerate(slots, start=1):
        print(f"  {number}) {name}")
    answer = _prompt("Use which power-up (blank to cancel)? ")
    if not answer or not answer.strip().isdigit():
        return
    index = int(answer) - 1
    if 0 <= index < min(POWER_SLOTS, len(player.powerups)):
        player.use_powerup(index)


def _shop_menu(player: Player, rng: random.Random) -> None:
    items = list(ShopItem)
    for number, item in enumerate(items, start=1):
        print(f"  {number}) {item.value} ${item.cost}")
    answer = _prompt("Buy which item (blank to cancel)? ")
    if not answer or not answer.strip().isdigit():
        return
    index = int(answer) - 1
    if 0 <= index < len(items):
        buy(player, items[index], rng)


def _show_leaderboard(path: str) -> None:
    print("Leaderboard - Forbes Top List")
    for rank, (name, money) in enumerate(top_entries(path), start=1):
        print(f"{rank}. {name} ${money}")


def _human_turn(game: Game, leaderboard_path: str) -> bool:
    """Handle one command for a human player; return False to quit."""
    answer = _prompt(f"{game.current.name}'s turn. {_COMMANDS_HELP}: ")
    if answer is None:
        return False
    command = answer.strip().lower()[:1] or "r"
    if command == "q":
        return False
    if command == "p":
        _power_menu(game.current)
    elif command == "s":
        _shop_menu(game.current, game.rng)
    elif command == "l":
        _show_leaderboard(leaderboard_path)
    elif command == "t":
        print(TUTORIAL)
    elif command == "r":
        player = game.current
        roll = game.roll_dice()
        if game.take_turn(roll) is not None:
            print(f"DICE: {roll}  {player.name} is now at {player.position}")
        print(_status(game))
    else:
        print(_COMMANDS_HELP)
    return True


def _finish_single_game(game: Game, leaderboard_path: str) -> None:
    for number, player in enumerate(game.players, start=1):
        print(f"Player {number} Ending")
        print(ending_for(player.money))
        print(f"{player.name}\n${player.money}\n")
    for player in game.players:
        if not player.is_cpu:
            add_earnings(leaderboard_path, player.name, player.money)


def _play(game: Game, leaderboard_path: str) -> None:
    print(_status(game))
    while not game.over:
        if game.current_is_ai:
            played = game.games_played
            roll = game.ai_turn()
            if roll is not None:
                print(f"DICE: {roll}")
            if game.games_played > played:
                print(results_summary(game.games_played, game.total_games - game.games_played))
                print(bar_graph(game.player1_wins, game.player2_wins))
        elif not _human_turn(game, leaderboard_path):
            return
    if not game.multi_game_mode:
        _finish_single_game(game, leaderboard_path)


def main(argv: Optional[list[str]] = None) -> int:
    """Set up the players from arguments or prompts, then play."""
    parser, args = _parse_args(argv)
    rng = random.Random(args.seed)

    mode = args.mode or _choose_mode()
    if mode is None:
        return 0

    if mode == "all-cpu":
        if args.games is not None and args.games < 1:
            parser.error("--games must be at least 1")
        games = args.games if args.games is not None else _choose_games()
        if games is None:
            return 0
        player1 = Player(CPU_NAME, _print_notice)
        player2 = Player(CPU_NAME, _print_notice)
    else:
        games = 1
        vs_ai = mode == "cpu"
        if args.player1 is not None and (vs_ai or args.player2 is not None):
            try:
                names = validate_names(
                    args.player1, CPU_NAME if vs_ai else args.player2, vs_ai
                )
            except ValueError as error:
                parser.error(str(error))
        else:
            chosen = _choose_names(vs_ai)
            if chosen is None:
                return 0
            names = chosen
        player1 = Player(names[0], _print_notice)
        player2 = Player(names[1], _print_notice)

    game = Game(player1, player2, games, rng)
    _play(game, args.leaderboard)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())