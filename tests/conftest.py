import pytest

from sleuth.cases.catalog import require_case
from sleuth.engine import CaseEngine
from sleuth.investigation.results import SessionState
from sleuth.util.rng import Rng


@pytest.fixture()
def case():
    return require_case(1)


@pytest.fixture()
def state(case):
    return SessionState(case_id=case.id)


@pytest.fixture()
def engine():
    return CaseEngine.start(1, rng=Rng(7))


def solve_all_minigames(engine):
    """Earn one point per minigame of case 1."""
    engine.submit_minigame("timeline", ["e1", "e2", "e3", "e4"])
    evidence = engine.case.minigame("evidence")
    engine.submit_minigame("evidence", {pair.left: pair.right for pair in evidence.pairs})
    engine.submit_minigame("pattern", 2)


def go_to_interviews(engine):
    engine.advance_phase()
    engine.advance_phase()


def interview_everyone(engine):
    for suspect in engine.case.suspects:
        engine.select_suspect(suspect.id)
        for statement in suspect.statements:
            engine.tap_statement(suspect.id, statement.id)
