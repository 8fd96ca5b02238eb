import pytest
from mastermind.engine import DEFAULT_RULES, Feedback, Rules, score
from mastermind.players import (
    ComputerBreaker,
    ComputerMaker,
    HumanBreaker,
    HumanMaker,
    Operator,
    Role,
    create_player,
    get_player_ids,
)


def test_computer_maker_draws_palette_codes():
    maker = ComputerMaker(seed=5)
    for _ in range(50):
        code = maker.generate_code()
        assert len(code) == 4
        assert all(c in DEFAULT_RULES.palette for c in code)


def test_computer_maker_is_seeded():
    a = [ComputerMaker(seed=9).generate_code() for _ in range(3)]
    b = [ComputerMaker(seed=9).generate_code() for _ in range(3)]
    assert a == b


def test_computer_maker_repeats_colors_with_single_color_palette():
    maker = ComputerMaker(Rules(palette=("red",), code_length=3))
    assert maker.generate_code() == ("red", "red", "red")


def test_computer_breaker_remembers_guess_and_prunes():
    secret = ("blue", "blue", "yellow", "red")
    breaker = ComputerBreaker(seed=11)
    guess = breaker.guess()
    assert breaker.last_guess == guess

    before = len(breaker.candidates)
    breaker.log_evaluation(score(guess, secret), guess)
    assert len(breaker.candidates) <= before
    assert secret in breaker.candidates


def test_human_players_delegate_to_prompt():
    codes = iter([("red", "red", "red", "red"), ("blue", "blue", "blue", "blue")])
    maker = HumanMaker(prompt=lambda: next(codes))
    breaker = HumanBreaker(prompt=lambda: next(codes))
    assert maker.generate_code() == ("red", "red", "red", "red")
    assert breaker.guess() == ("blue", "blue", "blue", "blue")
    assert breaker.log_evaluation(Feedback(0, 0), ("blue",) * 4) is None


@pytest.mark.parametrize("role,operator,cls", [
    (Role.MAKER, Operator.COMPUTER, ComputerMaker),
    (Role.BREAKER, Operator.COMPUTER, ComputerBreaker),
    ("maker", "HUMAN", HumanMaker),
    ("BREAKER", "human", HumanBreaker),
])
def test_create_player(role, operator, cls):
    kwargs = {"prompt": lambda: ("red",) * 4} if cls in (HumanMaker, HumanBreaker) else {"seed": 1}
    player = create_player(role, operator, **kwargs)
    assert isinstance(player, cls)
    assert player.rules == DEFAULT_RULES


def test_create_player_unknown_raises():
    with pytest.raises(ValueError) as exc:
        create_player("referee", "computer")
    assert str(exc.value).startswith("Unknown player referee/computer. Available:")
    assert "BREAKER/computer" in str(exc.value)


def test_player_ids():
    assert get_player_ids() == ["BREAKER/computer", "BREAKER/human", "MAKER/computer", "MAKER/human"]
