"""Players and the power-ups they can collect and use."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

Notifier = Callable[["Player", str], None]

CPU_NAME = "CPU"


class PowerUp(ABC):
    """A one-shot ability held in a player's inventory."""

    name: str = "Power-Up"

    @abstractmethod
    def apply(self, player: Player) -> None:
        """Apply the effect to ``player``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MovePower(PowerUp):
    """Job Promotion: move 3 spaces and raise income by 50%."""

    name = "Job Promotion"

    def apply(self, player: Player) -> None:
        player.move_forward(3)
        player.modify_income(0.5)
        player.used_powerup_this_turn = True
        player.notify("Used Job Promotion! Moved 3 spaces and got a 50% income boost!")


class StealPower(PowerUp):
    """Bank Account Hack: take 30% of the opponent's cash, or push them into debt."""

    name = "Bank Account Hack"

    def apply(self, player: Player) -> None:
        opponent = player.opponent
        if opponent is None:
            player.notify("No opponent to steal from!")
        elif opponent.money > 0:
            amount = int(opponent.money * 0.3)
            opponent.add_money(-amount)
            player.add_money(amount)
            player.notify(
                f"Used Bank Account Hack! Stole 30% of your opponent's cash: ${amount}"
            )
        else:
            opponent.add_money(-3000)
            player.notify(
                "Used Bank Account Hack!\nYour opponent had no money...\n"
                "So you added $3000 to their debt."
            )
        player.used_powerup_this_turn = False


class SkipPower(PowerUp):
    """Time Freeze: the opponent loses their next turn."""

    name = "Time Freeze"

    def apply(self, player: Player) -> None:
        opponent = player.opponent
        if opponent is None:
            player.notify("No opponent to skip!")
        else:
            opponent.skip_next_turn = True
            player.notify("Used Time Freeze! Your opponent's next turn will be skipped.")
        player.used_powerup_this_turn = False


class SuperMovePower(PowerUp):
    """Speed Boost: move 6 spaces."""

    name = "Speed Boost"

    def apply(self, player: Player) -> None:
        player.move_forward(6)
        player.notify("Used Speed Boost! Zoomed forward 6 spaces!")
        player.used_powerup_this_turn = True


class MoneyPower(PowerUp):
    """Energy Drink: gain $1000."""

    name = "Energy Drink"

    def apply(self, player: Player) -> None:
        player.add_money(1000)
        player.notify("Used Energy Drink! You worked all night and gained $1000.")
        player.used_powerup_this_turn = False


_POWERUP_KINDS: tuple[type[PowerUp], ...] = (
    MovePower,
    StealPower,
    MoneyPower,
    SkipPower,
    SuperMovePower,
)


def random_powerup(rng: random.Random) -> PowerUp:
    """Return a new power-up chosen uniformly from the five kinds."""
    return _POWERUP_KINDS[rng.randrange(len(_POWERUP_KINDS))]()


class Player:
    """A player's state on the board: position, money, income and inventory."""

    def __init__(self, name: str, notifier: Optional[Notifier] = None) -> None:
        self.name = name
        self.notifier = notifier
        self.position = 0
        self.money = 0
        self.income_multiplier = 1.0
        self.used_powerup_this_turn = False
        self.skip_next_turn = False
        self.finished = False
        self.powerups: list[PowerUp] = []
        self.opponent: Optional[Player] = None

    def __repr__(self) -> str:
        return (
            f"Player(name={self.name!r}, position={self.position}, "
            f"money={self.money}, income={self.income_percent}%)"
        )

    @property
    def is_cpu(self) -> bool:
        return self.name == CPU_NAME

    @property
    def income_percent(self) -> float:
        """Income multiplier as a percentage, e.g. 115.0 for 1.15x."""
        return self.income_multiplier * 100.0

    def add_money(self, amount: int) -> None:
        self.money += int(amount)

    def modify_income(self, percent: float) -> None:
        self.income_multiplier += percent

    def move_forward(self, steps: int) -> None:
        self.position += steps

    def move_backward(self, steps: int) -> None:
        """Move back, never past the first tile."""
        self.position = max(0, self.position - steps)

    def give_random_powerup(self, rng: random.Random) -> PowerUp:
        power = random_powerup(rng)
        self.notify(f"Gained Power-Up: {power.name}!")
        self.powerups.append(power)
        return power

    def add_power(self, power: PowerUp) -> None:
        self.powerups.append(power)

    def use_powerup(self, index: int) -> PowerUp:
        """Apply and remove the power-up at ``index``."""
        if not 0 <= index < len(self.powerups):
            raise IndexError(f"no power-up at index {index}")
        self.used_powerup_this_turn = False
        power = self.powerups[index]
        power.apply(self)
        del self.powerups[index]
        return power

    def notify(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier(self, message)

    def clear_skip_turn(self) -> None:
        self.skip_next_turn = False

    def mark_finished(self) -> None:
        self.finished = True

    def reset_for_new_game(self) -> None:
        """Put the player back at the start with no money, keeping other state."""
        self.position = 0
        self.money = 0
        self.finished = False