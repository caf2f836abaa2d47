"""The shop where players spend money on power-ups and upgrades."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from devlife.gamelogic import MoneyPower, MovePower, Player, StealPower


class ShopItem(Enum):
    MOVE = "move"
    STEAL = "steal"
    MONEY = "money"
    LOTTERY = "lottery"
    STORE = "store"

    @property
    def cost(self) -> int:
        return _COSTS[self]


_COSTS: dict[ShopItem, int] = {
    ShopItem.MOVE: 1000,
    ShopItem.STEAL: 20000,
    ShopItem.MONEY: 20000,
    ShopItem.LOTTERY: 3000,
    ShopItem.STORE: 85000,
}

_REFUSALS: dict[ShopItem, str] = {
    ShopItem.MOVE: "Dang. Not enough money for an energy drink.",
    ShopItem.STEAL: "Not enouugh money for that. Stick to inspect element.",
    ShopItem.MONEY: "Not enough cash... stick to Linkedin.",
    ShopItem.LOTTERY: "You don't have enough money to buy a lottery ticket.",
    ShopItem.STORE: "You can't afford a store yet. Keep hustling.",
}

STORE_INCOME_BOOST = 5.0


def _lottery_prize(rng: random.Random) -> int:
    roll = rng.randrange(10) + 1
    if roll <= 5:
        return 500
    if roll <= 8:
        return 1500
    if roll == 9:
        return 3000
    return 10000


def buy(player: Player, item: ShopItem, rng: Optional[random.Random] = None) -> bool:
    """Buy ``item`` for ``player`` if they can afford it; return whether they did."""
    if player.money < item.cost:
        player.notify(_REFUSALS[item])
        return False

    player.add_money(-item.cost)
    if item is ShopItem.MOVE:
        player.add_power(MovePower())
        player.notify("You bought an energy drink.")
    elif item is ShopItem.STEAL:
        player.add_power(StealPower())
        player.notify("You bought a really shady html script.")
    elif item is ShopItem.MONEY:
        player.add_power(MoneyPower())
        player.notify("Nepotism rules! You got yourself a connection.")
    elif item is ShopItem.LOTTERY:
        prize = _lottery_prize(rng if rng is not None else random.Random())
        player.add_money(prize)
        player.notify(
            "You bought a lottery ticket!\n"
            "You input the numbers and...\n\n"
            f"Your ticket won ${prize}!"
        )
    else:
        player.modify_income(STORE_INCOME_BOOST)
        player.notify(
            "You hand the cashier 85k.\nThis store is yours now.\n"
            "Your passive income skyrocketed by 500%."
        )
    return True