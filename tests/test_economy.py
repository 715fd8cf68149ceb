from sleuth import config
from sleuth.domain.enums import ToolId
from sleuth.investigation.economy import (
    MINIGAME_CLUE,
    MINIGAME_FEEDBACK,
    can_afford,
    complete_minigame,
    remaining_points,
    spend_point,
)


def test_complete_minigame_awards_once(state):
    assert complete_minigame(state, "timeline") is True
    assert state.points_earned == 1
    for _ in range(3):
        assert complete_minigame(state, "timeline") is False
    assert state.points_earned == 1
    assert state.completed_minigame_ids == {"timeline"}
    assert [clue.text for clue in state.clue_log] == [MINIGAME_CLUE]
    assert state.last_feedback == MINIGAME_FEEDBACK


def test_each_minigame_awards_its_own_point(state):
    complete_minigame(state, "timeline")
    complete_minigame(state, "evidence")
    assert state.points_earned == 2
    assert remaining_points(state) == 2


def test_remaining_never_negative(state):
    state.points_spent = 5
    assert remaining_points(state) == 0


def test_remaining_is_capped(state):
    state.points_earned = 5000
    assert remaining_points(state) == config.POINTS_CAP


def test_spend_declines_without_points(state):
    assert spend_point(state, ToolId.LIE_DETECTOR) is False
    assert state.points_spent == 0
    assert can_afford(state, ToolId.LIE_DETECTOR) is False


def test_spend_debits_tool_cost(state):
    complete_minigame(state, "timeline")
    assert can_afford(state, ToolId.WATCH) is True
    assert spend_point(state, ToolId.WATCH) is True
    assert state.points_spent == 1
    assert remaining_points(state) == 0
    assert spend_point(state, ToolId.WATCH) is False
    assert state.points_spent == 1


def test_spend_unknown_tool_is_declined(state):
    complete_minigame(state, "timeline")
    assert spend_point(state, "magnifier") is False
    assert state.points_spent == 0
