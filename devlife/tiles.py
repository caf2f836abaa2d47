"""Board tiles and what happens to a player who lands on them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from devlife.gamelogic import Player


class TileType(Enum):
    EMPTY = "empty"
    MONEY = "money"
    POWERUP = "powerup"
    FORWARD = "forward"
    BACKWARD = "backward"
    LIFE_EVENT = "life_event"
    SUPER_MONEY = "super_money"


def _format_amount(value: float) -> str:
    return f"{value:g}"


class Tile(ABC):
    """A square on the board with an effect on whoever lands there."""

    color: str = "#ffffff"
    type_name: str = "Tile"

    @abstractmethod
    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        """Apply the tile's effect and return the message shown, if any."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmptyTile(Tile):
    type_name = "EmptyTile"

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        return None


class MoneyTile(Tile):
    """Pays the player 100 times their income percentage."""

    color = "#a8e6a1"
    type_name = "MoneyTile"

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        amount = 100 * player.income_percent
        message = "$" + _format_amount(amount)
        player.add_money(int(amount))
        player.notify(message)
        return message


class SuperMoneyTile(Tile):
    """Pays one of three jackpots."""

    color = "#66aa88"
    type_name = "SuperMoneyTile"
    jackpots: tuple[int, ...] = (10000, 25000, 50000)

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        jackpot = self.jackpots[rng.randrange(len(self.jackpots))]
        message = f"${jackpot}"
        player.add_money(jackpot)
        player.notify(message)
        return message


class PowerupTile(Tile):
    color = "#c7a8e6"
    type_name = "PowerupTile"

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        power = player.give_random_powerup(rng)
        return f"Gained Power-Up: {power.name}!"


# (message, money change)
_FORWARD_EVENTS: tuple[tuple[str, int], ...] = (
    ("Your parents send their support.", 0),
    ("You fixed all the bugs during an all-nighter!", 0),
    ("Stack Exchange came through with perfect docs.", 0),
    ("You're typing faster than light!", 0),
    ("It worked on the first try?!", 0),
    ("Professor curved the exam... heavily.", 0),
    ("Your resume went viral on LinkedIn. \nFreelance gig gave you $1000!", 1000),
    (
        "You optimized a O(n^50) function \ndown to O(n). TA just handed \nyou $300 in awe.",
        300,
    ),
    (
        "You suddenly get a scholarship for \nbeing a stellar student. Gain $5000!",
        5000,
    ),
    (
        "Google is trying to bribe you with $1500 \nto join them because you're so good at CS!",
        1500,
    ),
)

_BACKWARD_EVENTS: tuple[tuple[str, int], ...] = (
    ("You did your partner\u2019s part of the group project.", 0),
    ("You missed the project meeting!", 0),
    ("You got sick, and your prof said 'tough luck'.", 0),
    ("Endless bugs... try reinstalling VSCode?", 0),
    ("You deleted System32.\nRIP. $500 also flies out\nof your pocket.", -500),
    (
        "Turns out your homework is the\nexact same as another student's.\nHuh.",
        0,
    ),
    ("You spilled coffee on your new\nMacbook. Repairs cost $1000.", -1000),
    ("You opened TikTok and lost\n3.51 hours of productivity.", 0),
    ("Your code compiles but nothing works.\nEmotional damage.", 0),
    ("You forgot to stay hydrated\nand fainted during your midterm.", 0),
    ("Your GPU exploded during training.\nReplacement cost: $2000.", -2000),
    (
        "You accidentally committed your\nprivate key to GitHub. Your bank account\n"
        " is now $5000 lighter.",
        -5000,
    ),
    ("You invested in Dogecoin at its peak.\nMarket crash wipes out $3000.", -3000),
    ("Laptop stolen in a coffee shop.\nYou lose $1500 buying a new one.", -1500),
    ("You bought a $2000 NFT. It is now worth... nothing.", -2000),
    (
        "Your project got flagged for plagiarism\nby ChatGPT detector.\n"
        "Legal fees cost $7000.",
        -7000,
    ),
    ("You got scammed by a phishing email.\nGoodbye, $9000.", -9000),
    (
        "Your landlord raised rent retroactively.\nPay $10000 or get evicted.",
        -10000,
    ),
    (
        "You accidentally bought a year's\nsupply of GPUs on your mom\u2019s credit card.\n"
        "She makes you pay back $15000.",
        -15000,
    ),
    (
        "North Korea just hacked you for no reason.\nRansomware hit. You lose $50000.",
        -50000,
    ),
)


class MoveForwardTile(Tile):
    """Moves the player forward 1-5 spaces with a random good event."""

    color = "#ffe066"
    type_name = "MoveForwardTile"

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        event, bonus = _FORWARD_EVENTS[rng.randrange(len(_FORWARD_EVENTS))]
        steps = rng.randrange(5) + 1
        player.move_forward(steps)
        if bonus:
            player.add_money(bonus)
        message = f"Nice!\n{event}\nYou move forward {steps} spaces!"
        player.notify(message)
        return message


class MoveBackwardTile(Tile):
    """Moves the player back 1-5 spaces with a random bad event."""

    color = "#f4a6a6"
    type_name = "MoveBackwardTile"

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        event, cost = _BACKWARD_EVENTS[rng.randrange(len(_BACKWARD_EVENTS))]
        steps = rng.randrange(5) + 1
        player.move_backward(steps)
        if cost:
            player.add_money(cost)
        message = f"Oh no!\n{event}\nYou move backward {steps} spaces!"
        player.notify(message)
        return message


def _life_event(player: Player, event_roll: int, roll: int) -> tuple[str, str]:
    """Apply life event ``event_roll`` with dice ``roll``; return (intro, outcome)."""
    low, mid = roll <= 2, roll <= 4
    if event_roll == 1:
        intro = "You will have a job interview!\nRoll the dice to find out your fate!"
        if low:
            return intro, "You failed :(\nNothing happens. All you've lost is your pride..."
        if mid:
            player.modify_income(0.15)
            return intro, (
                "Congrats you passed!\nYou're on pace to becoming\n"
                "a fine software dev!\n+15% income."
            )
        player.modify_income(0.30)
        return intro, "You're the new CEO! +30% income."
    if event_roll == 2:
        intro = (
            "You're taking your final exam for CSCI 3010!\nI hope you studied...\n"
            "Roll the dice to find out your fate!"
        )
        if low:
            player.move_backward(2)
            return intro, (
                "You got a 15% on your final :(\nNot even the curve will save this.\n"
                "Move back 2 spaces."
            )
        if mid:
            return intro, (
                "You passed!\nYou know what they say, \"C's get degrees!\"\nNothing happens."
            )
        player.move_forward(2)
        return intro, (
            "You got an A!\nAll of that studying finally paid off!\nMove forward 2 spaces!"
        )
    if event_roll == 3:
        intro = "Your project is due today at 11:59PM.\nRoll the dice to find out your fate!"
        if low:
            player.move_backward(2)
            return intro, (
                "You failed to turn in your project on time :(\nCut back on gaming maybe.\n"
                "Move back 2 spaces!"
            )
        if mid:
            return intro, (
                "You turned in your project on time.\nNo extra reward for doing your job.\n"
                "Nothing happens."
            )
        player.move_forward(2)
        return intro, "Wow! You turned it in 5 months early!\nMove forward 2 spaces!"
    if event_roll == 4:
        intro = "Your friend invites you to a hangout.\nRoll the dice to see how it goes!"
        if low:
            player.move_backward(1)
            player.add_money(-1000)
            return intro, (
                "You got wasted and now you're hungover.\n"
                "Your friends ran away, you pay for everything..\n"
                "Move back 1 space, pay $1000."
            )
        if mid:
            return intro, "It was an alright hangout.\nNothing drastic happened."
        player.move_forward(1)
        return intro, (
            "You got a well-deserved break!\nYou're energized.\nMove forward 1 space."
        )
    if event_roll == 5:
        intro = "You got an internship offer!\nRoll to see which company..."
        if low:
            player.move_backward(1)
            return intro, (
                "Unpaid crypto internship...\nThey pay you in exposure.\nMove back 1 space."
            )
        if mid:
            player.modify_income(0.10)
            return intro, (
                "Internship at a dev shop.\nGood experience, no raise.\n+10% income."
            )
        player.modify_income(0.25)
        player.add_money(500)
        return intro, "FAANG internship! Free hoodie and $500.\n+25% income!"
    intro = "It's group presentation day!\nRoll the dice!"
    if low:
        player.move_backward(2)
        return intro, (
            "No one showed up but you.\nYou froze on stage.\nMove back 2 spaces."
        )
    if mid:
        return intro, "You mumbled through your slides.\nPassable. Nothing happens."
    player.move_forward(2)
    return intro, (
        "Your presentation went viral!\nThe prof clapped.\nMove forward 2 spaces!"
    )


class LifeEventTile(Tile):
    """A random life event whose outcome depends on a dice roll."""

    color = "#99ccee"
    type_name = "LifeEventTile"

    def activate(self, player: Player, rng: random.Random) -> Optional[str]:
        event_roll = rng.randrange(6) + 1
        roll = rng.randrange(6) + 1
        intro, outcome = _life_event(player, event_roll, roll)
        player.notify(intro)
        player.notify(outcome)
        return outcome


_TILE_CLASSES: dict[TileType, type[Tile]] = {
    TileType.EMPTY: EmptyTile,
    TileType.MONEY: MoneyTile,
    TileType.POWERUP: PowerupTile,
    TileType.FORWARD: MoveForwardTile,
    TileType.BACKWARD: MoveBackwardTile,
    TileType.LIFE_EVENT: LifeEventTile,
    TileType.SUPER_MONEY: SuperMoneyTile,
}


def create_tile(tile_type: TileType) -> Tile:
    """Return a new tile of the given type; unknown types give an empty tile."""
    return _TILE_CLASSES.get(tile_type, EmptyTile)()