"""Turn order, movement and scoring for a two-player game on the board."""

from __future__ import annotations

import random
from typing import Optional

from devlife.board import Board
from devlife.gamelogic import Player

FROZEN_MESSAGE = "You're frozen in time.. turn was skipped!"


class Game:
    """Two players taking turns along the board's path, possibly over several games."""

    def __init__(
        self,
        player1: Player,
        player2: Player,
        total_games: int = 1,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        if total_games < 1:
            raise ValueError("at least one game must be played")
        self.player1 = player1
        self.player2 = player2
        self.rng = rng if rng is not None else random.Random()
        self.board = board if board is not None else Board()

        self.is_ai = player2.is_cpu
        self.all_ai = player1.is_cpu and player2.is_cpu
        self.multi_game_mode = self.all_ai and total_games > 1
        self.total_games = total_games
        self.games_played = 0
        self.player1_wins = 0
        self.player2_wins = 0

        player1.opponent = player2
        player2.opponent = player1

        self.is_player1_turn = True
        self.current = player1
        self.over = False
        self.last_roll: Optional[int] = None

    @property
    def players(self) -> tuple[Player, Player]:
        return self.player1, self.player2

    @property
    def current_is_ai(self) -> bool:
        """Whether the player whose turn it is plays automatically."""
        return self.all_ai or (self.is_ai and not self.is_player1_turn)

    def roll_dice(self) -> int:
        """Roll a six-sided die."""
        return self.rng.randrange(6) + 1

    def take_turn(self, roll: int) -> Optional[int]:
        """Play the current player's turn with ``roll``.

        Returns the position the player ends on, or None when the turn was
        passed because the player had finished or was frozen.
        """
        self._check_running()
        if roll < 1:
            raise ValueError(f"a roll must be positive, got {roll}")
        if self._pass_turn_if_blocked():
            return None
        self.last_roll = roll
        return self._move(roll)

    def ai_turn(self) -> Optional[int]:
        """Play the current player's turn automatically and return the dice roll.

        Half the time the player first uses a random power-up from its
        inventory. Returns None when the turn was passed.
        """
        self._check_running()
        if self._pass_turn_if_blocked():
            return None
        player = self.current
        if player.powerups and self.rng.randrange(2) == 0:
            index = self.rng.randrange(len(player.powerups))
            power = player.powerups[index]
            power.apply(player)
            del player.powerups[index]
        roll = self.roll_dice()
        self.last_roll = roll
        self._move(roll)
        return roll

    def switch_to_next_active_player(self) -> Optional[Player]:
        """Hand the turn to the next player who has not finished.

        When both have finished the game ends: in multi-game mode the result is
        recorded and the next game starts, otherwise (or after the last game)
        the game is over and None is returned.
        """
        if self.over:
            return None
        for _ in range(2):
            self.is_player1_turn = not self.is_player1_turn
            self.current = self.player1 if self.is_player1_turn else self.player2
            if not self.current.finished:
                return self.current

        if self.multi_game_mode:
            self.record_result()
            if self.games_played < self.total_games:
                self.start_new_ai_game()
                return self.current
        self.over = True
        return None

    def record_result(self) -> Optional[Player]:
        """Count a finished game and return its winner by money, or None on a tie."""
        self.games_played += 1
        if self.player1.money > self.player2.money:
            self.player1_wins += 1
            return self.player1
        if self.player2.money > self.player1.money:
            self.player2_wins += 1
            return self.player2
        return None

    def start_new_ai_game(self) -> None:
        """Reset both players to the start, keeping the win counts."""
        for player in self.players:
            player.reset_for_new_game()
        self.is_player1_turn = True
        self.current = self.player1
        self.last_roll = None

    def _check_running(self) -> None:
        if self.over:
            raise RuntimeError("the game is over")

    def _pass_turn_if_blocked(self) -> bool:
        player = self.current
        if player.finished:
            self.switch_to_next_active_player()
            return True
        if player.skip_next_turn:
            player.clear_skip_turn()
            player.notify(FROZEN_MESSAGE)
            self.switch_to_next_active_player()
            return True
        return False

    def _move(self, roll: int) -> int:
        player = self.current
        player.position = min(player.position + roll, self.board.last_position)
        self._resolve_tiles(player)
        position = player.position
        if position >= self.board.last_position:
            player.mark_finished()
        self.switch_to_next_active_player()
        return position

    def _resolve_tiles(self, player: Player) -> None:
        """Activate the tile under the player, following any moves tiles cause."""
        while 0 <= player.position < len(self.board):
            before = player.position
            self.board.tile_at(before).activate(player, self.rng)
            after = player.position
            if after == before or after >= len(self.board):
                return