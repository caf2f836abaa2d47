import pytest

from devlife.endings import ending_for


@pytest.mark.parametrize(
    "money,title",
    [
        (-1, "In Debt"),
        (-50000, "In Debt"),
        (0, "Unemployed"),
        (9999, "Unemployed"),
        (10000, "Intern"),
        (24999, "Intern"),
        (25000, "QA Tester"),
        (40000, "Junior Dev"),
        (60000, "Startup Developer"),
        (80000, "FAANG Employee"),
        (99999, "FAANG Employee"),
        (100000, "CTO"),
        (114999, "CTO"),
        (115000, "CEO"),
        (10_000_000, "CEO"),
    ],
)
def test_ending_titles(money, title):
    assert ending_for(money).split("\n")[0] == title


def test_ending_full_text():
    assert ending_for(200000) == (
        "CEO\nYou force your employees to play golf with you every Sunday."
    )


def test_endings_are_monotonic_in_money():
    titles = [ending_for(m).split("\n")[0] for m in range(-1000, 130000, 500)]
    seen = []
    for title in titles:
        if not seen or seen[-1] != title:
            assert title not in seen
            seen.append(title)
    assert seen[0] == "In Debt"
    assert seen[-1] == "CEO"