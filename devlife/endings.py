"""Career endings chosen by how much money a player finished with."""

from __future__ import annotations

_ENDINGS: tuple[tuple[int, str], ...] = (
    (0, "In Debt\nYou owe your school, your landlord, and your mom. Good luck."),
    (
        10000,
        "Unemployed\nYou have no job and live with your parents, downloading random "
        "scripts online for your Instagram meme account.",
    ),
    (
        25000,
        "Intern\nYou get paid in coffee and startup stickers, but at least you\u2019re "
        "in the system.",
    ),
    (40000, "QA Tester\nYou test mobile apps and make TikToks on the side."),
    (
        60000,
        "Junior Dev\nYou finally have a desk, but your monitor is half the size of "
        "your phone.",
    ),
    (80000, "Startup Developer\nYou work 80-hour weeks for equity and instant ramen."),
    (
        100000,
        "FAANG Employee\nYou have project deadline after project deadline, but at "
        "least you have a stable, nice income.",
    ),
    (115000, "CTO\nYou drink cold brew, say 'scale' a lot, and live on Slack."),
)

_TOP_ENDING = "CEO\nYou force your employees to play golf with you every Sunday."


def ending_for(money: int) -> str:
    """Return the title and description of the ending earned with ``money``."""
    for limit, ending in _ENDINGS:
        if money < limit:
            return ending
    return _TOP_ENDING