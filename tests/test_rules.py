"""Unit tests for legality and forced draws."""

import itertools

import pytest

from unosim.engine import (
    ChangeColor,
    Color,
    Deck,
    Draw,
    Draw2,
    Draw4,
    DrawFactor,
    MustDraw,
    Number,
    Play,
    PlayWildcard,
    Reverse,
    Skip,
    StrategyViolation,
    can_draw,
    check_turn,
    is_colored,
    is_playable,
    legal_turns,
    stack_must_draw,
)

RED, GREEN, BLUE, YELLOW = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW
TWO = MustDraw(DrawFactor.TWO, 2)
FOUR = MustDraw(DrawFactor.FOUR, 4)
ALL_CARDS = sorted(set(Deck.standard()), key=str)


def test_color_match() -> None:
    assert is_playable(Number(3, RED), Number(7, RED), RED, None)
    assert not is_playable(Number(3, BLUE), Number(7, RED), RED, None)


def test_active_color_overrides_card_color() -> None:
    # After a wildcard the active color, not the top card, decides.
    assert is_playable(Number(3, GREEN), Number(7, RED), GREEN, None)
    assert not is_playable(Number(3, RED), ChangeColor(), GREEN, None)


def test_number_match() -> None:
    assert is_playable(Number(7, BLUE), Number(7, RED), RED, None)
    assert not is_playable(Number(7, BLUE), Skip(RED), RED, None)


@pytest.mark.parametrize("kind", [Skip, Reverse, Draw2])
def test_same_action_type_matches(kind) -> None:
    assert is_playable(kind(BLUE), kind(RED), RED, None)
    assert not is_playable(kind(BLUE), Number(1, RED), RED, None)


def test_wildcards_without_obligation() -> None:
    assert is_playable(ChangeColor(), Number(1, RED), RED, None)
    assert is_playable(Draw4(), Number(1, RED), RED, None)


def test_two_obligation_answers() -> None:
    assert is_playable(Draw2(BLUE), Draw2(RED), RED, TWO)
    assert is_playable(Draw4(), Draw2(RED), RED, TWO)
    assert not is_playable(Number(1, RED), Draw2(RED), RED, TWO)
    assert not is_playable(Skip(RED), Draw2(RED), RED, TWO)
    assert not is_playable(ChangeColor(), Draw2(RED), RED, TWO)


def test_four_obligation_answers() -> None:
    assert is_playable(Draw4(), Draw4(), RED, FOUR)
    assert not is_playable(Draw2(RED), Draw4(), RED, FOUR)
    assert not is_playable(ChangeColor(), Draw4(), RED, FOUR)


def test_stack_must_draw() -> None:
    assert stack_must_draw(None, Draw2(RED)) == MustDraw(DrawFactor.TWO, 2)
    assert stack_must_draw(TWO, Draw2(BLUE)) == MustDraw(DrawFactor.TWO, 4)
    assert stack_must_draw(None, Draw4()) == MustDraw(DrawFactor.FOUR, 4)
    assert stack_must_draw(TWO, Draw4()) == MustDraw(DrawFactor.FOUR, 6)
    assert stack_must_draw(MustDraw(DrawFactor.FOUR, 8), Draw4()) == MustDraw(DrawFactor.FOUR, 12)
    assert stack_must_draw(None, Skip(RED)) is None
    assert stack_must_draw(None, ChangeColor()) is None


def test_can_draw() -> None:
    assert not can_draw([Number(1, RED)], RED, None)
    assert can_draw([Number(1, BLUE), Draw4()], RED, None)
    assert can_draw([Number(1, RED)], RED, TWO)


def test_legal_turns() -> None:
    hand = [Number(4, RED), Number(4, RED), Number(9, BLUE), Draw4()]
    turns = legal_turns(hand, Number(1, RED), RED, None)
    assert Play(Number(4, RED)) in turns
    assert Play(Number(9, BLUE)) not in turns
    assert [t for t in turns if isinstance(t, Play)] == [Play(Number(4, RED))]
    assert {t.new_color for t in turns if isinstance(t, PlayWildcard)} == set(Color)
    assert Draw() not in turns


def test_legal_turns_under_obligation() -> None:
    hand = [Number(4, RED), Draw2(GREEN), ChangeColor()]
    assert legal_turns(hand, Draw2(RED), RED, TWO) == [Play(Draw2(GREEN)), Draw()]
    assert legal_turns(hand, Draw4(), RED, FOUR) == [Draw()]


def test_check_turn_rejects_wrong_card() -> None:
    turn = Play(Number(3, BLUE))
    with pytest.raises(StrategyViolation) as exc:
        check_turn(turn, [Number(3, BLUE)], Number(7, RED), RED, None)
    assert exc.value.turn == turn
    assert exc.value.last_card == Number(7, RED)
    assert exc.value.color is RED
    assert exc.value.must_draw is None


def test_check_turn_obligations() -> None:
    with pytest.raises(StrategyViolation, match="Draw 4 can be answered only by Draw 4"):
        check_turn(Play(Draw2(RED)), [Draw2(RED)], Draw4(), RED, FOUR)
    with pytest.raises(StrategyViolation, match="Draw 2 can be answered only"):
        check_turn(Play(Number(1, RED)), [Number(1, RED)], Draw2(RED), RED, TWO)
    with pytest.raises(StrategyViolation, match="Draw 4 card required"):
        check_turn(PlayWildcard(ChangeColor(), RED), [ChangeColor()], Draw2(RED), RED, TWO)
    check_turn(PlayWildcard(Draw4(), BLUE), [Draw4()], Draw2(RED), RED, TWO)
    check_turn(Draw(), [Number(1, RED)], Draw2(RED), RED, TWO)


def test_check_turn_unjustified_draw() -> None:
    with pytest.raises(StrategyViolation, match="Can't draw"):
        check_turn(Draw(), [Number(1, RED), Draw4()], Number(5, RED), RED, None)
    check_turn(Draw(), [Number(1, BLUE), Draw4()], Number(5, RED), RED, None)


def test_check_turn_wrong_variant() -> None:
    with pytest.raises(StrategyViolation):
        check_turn(Play(Draw4()), [Draw4()], Number(5, RED), RED, None)
    with pytest.raises(StrategyViolation):
        check_turn(PlayWildcard(Number(5, RED), BLUE), [Number(5, RED)], Number(5, RED), RED, None)


@pytest.mark.parametrize("must_draw", [None, TWO, FOUR])
def test_check_turn_agrees_with_is_playable(must_draw) -> None:
    lasts = [Number(5, RED), Skip(GREEN), Reverse(BLUE), Draw2(YELLOW), Draw4()]
    for card, last, color in itertools.product(ALL_CARDS, lasts, Color):
        turn = Play(card) if is_colored(card) else PlayWildcard(card, color)
        if is_playable(card, last, color, must_draw):
            check_turn(turn, [card], last, color, must_draw)
        else:
            with pytest.raises(StrategyViolation):
                check_turn(turn, [card], last, color, must_draw)
