from sleuth.domain.enums import Phase
from sleuth.investigation.phases import (
    ACCUSE_GUARD,
    ACCUSE_PROMPT,
    CASE_SELECT_PROMPT,
    INTERVIEW_GUARD,
    PHASE_ORDER,
    advance_phase,
)
from sleuth.investigation.results import ActionOutcome


def _interview_all(case, state):
    state.interviewed_suspect_ids.update(s.id for s in case.suspects)


def test_intro_to_interviews_selects_first_suspect(case, state):
    advance_phase(case, state)
    assert state.phase == Phase.INVESTIGATION
    assert state.current_suspect_id is None
    advance_phase(case, state)
    assert state.phase == Phase.INTERVIEWS
    assert state.current_suspect_id == "lena"


def test_entering_interviews_keeps_selected_suspect(case, state):
    state.phase = Phase.INVESTIGATION
    state.current_suspect_id = "jenna"
    advance_phase(case, state)
    assert state.current_suspect_id == "jenna"


def test_interviews_guard(case, state):
    state.phase = Phase.INTERVIEWS
    state.interviewed_suspect_ids.update({"lena", "mark"})
    result = advance_phase(case, state)
    assert result.outcome == ActionOutcome.FAILURE
    assert state.phase == Phase.INTERVIEWS
    assert state.last_feedback == INTERVIEW_GUARD
    state.interviewed_suspect_ids.add("jenna")
    result = advance_phase(case, state)
    assert result.outcome == ActionOutcome.SUCCESS
    assert state.phase == Phase.DEDUCTION
    assert state.last_feedback is None


def test_transition_clears_stale_feedback(case, state):
    state.last_feedback = "old news"
    advance_phase(case, state)
    assert state.last_feedback is None


def test_accusation_never_auto_advances(case, state):
    state.phase = Phase.ACCUSATION
    _interview_all(case, state)
    result = advance_phase(case, state)
    assert result.outcome == ActionOutcome.NO_EFFECT
    assert state.phase == Phase.ACCUSATION
    assert state.last_feedback == ACCUSE_PROMPT
    state.interviewed_suspect_ids.clear()
    advance_phase(case, state)
    assert state.phase == Phase.ACCUSATION
    assert state.last_feedback == ACCUSE_GUARD


def test_entering_accusation_falls_back_without_interviews(case, state):
    state.phase = Phase.DEDUCTION
    result = advance_phase(case, state)
    assert result.outcome == ActionOutcome.FAILURE
    assert state.phase == Phase.DEDUCTION
    assert state.last_feedback == ACCUSE_GUARD


def test_resolution_goes_to_case_select(case, state):
    state.phase = Phase.RESOLUTION
    advance_phase(case, state)
    assert state.phase == Phase.CASE_SELECT
    result = advance_phase(case, state)
    assert result.outcome == ActionOutcome.NO_EFFECT
    assert state.phase == Phase.CASE_SELECT
    assert state.last_feedback == CASE_SELECT_PROMPT


def test_phase_order_is_monotonic(case, state):
    _interview_all(case, state)
    seen = [state.phase]
    for _ in range(10):
        advance_phase(case, state)
        if state.phase != seen[-1]:
            seen.append(state.phase)
    assert seen == PHASE_ORDER[:5]
