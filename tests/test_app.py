from sleuth.domain.enums import Phase
from sleuth.ui.app import SleuthApp


def test_app_starts_requested_case():
    app = SleuthApp(case_id=3, seed=5)
    assert app.engine.case.id == 3
    assert app.engine.state.phase == Phase.INTRO
    assert app.prompt_state is None
