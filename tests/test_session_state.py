from sleuth import config
from sleuth.domain.enums import Phase, ToolId
from sleuth.investigation.results import SessionState, ToolUse


def test_fresh_state():
    state = SessionState(case_id=1)
    assert state.phase == Phase.INTRO
    assert state.points_earned == 0
    assert state.points_spent == 0
    assert state.current_suspect_id is None
    assert state.active_tool_id is None
    assert len(state.clue_log) == 0
    assert state.last_feedback is None


def test_clue_log_keeps_newest_ten():
    state = SessionState(case_id=1)
    for idx in range(1, 12):
        state.add_clue(f"clue {idx}")
    texts = [clue.text for clue in state.clue_log]
    assert len(texts) == config.CLUE_LOG_LIMIT
    assert texts[0] == "clue 11"
    assert texts[-1] == "clue 2"
    assert "clue 1" not in texts


def test_tool_use_log_is_newest_first_and_unbounded():
    state = SessionState(case_id=1)
    for idx in range(15):
        state.record_tool_use(ToolUse(ToolId.WATCH, "lena", f"s{idx}", "ok"))
    assert len(state.tool_use_log) == 15
    assert state.tool_use_log[0].statement_id == "s14"


def test_sessions_do_not_share_collections():
    first = SessionState(case_id=1)
    second = SessionState(case_id=1)
    first.add_clue("only here")
    first.interviewed_suspect_ids.add("lena")
    assert len(second.clue_log) == 0
    assert second.interviewed_suspect_ids == set()
