from datetime import date

from americano_core import (
    apply_command,
    clamp_score,
    default_session_name,
    order_round,
    parse_scoring_scale,
)

NAMES = [f"P{i + 1}" for i in range(8)]


def _create(names=None, session_name="Test", scale=32):
    outcome = apply_command(
        None,
        {"type": "CREATE_SESSION", "sessionName": session_name, "names": names or NAMES},
        scale,
        today=date(2026, 10, 16),
    )
    assert outcome.ok
    return outcome.session


def _score(session, match_id):
    return session.find_match(match_id).score_a


def test_create_session_builds_participants_and_schedule():
    outcome = apply_command(
        None,
        {"type": "CREATE_SESSION", "sessionName": "  Test ", "names": NAMES},
        32,
    )
    assert outcome.ok
    assert outcome.changed
    session = outcome.session
    assert session.name == "Test"
    assert [(p.id, p.name) for p in session.participants] == list(enumerate(NAMES))
    assert len(session.matches) == 14
    assert session.swap_by_round.as_dict() == {}


def test_create_session_trims_names_and_defaults_blank_session_name():
    names = [f"  {name}  " for name in NAMES]
    session = _create(names=names, session_name="   ")
    assert [p.name for p in session.participants] == NAMES
    assert session.name == "Americano 16.10.2026"


def test_create_session_rejects_blank_name():
    existing = _create()
    names = list(NAMES)
    names[3] = "   "
    outcome = apply_command(existing, {"type": "CREATE_SESSION", "names": names}, 32)
    assert not outcome.ok
    assert not outcome.changed
    assert outcome.error.kind == "incomplete_names"
    assert outcome.error.message == "incomplete names"
    assert outcome.session is existing


def test_create_session_rejects_short_name_list():
    outcome = apply_command(None, {"type": "CREATE_SESSION", "names": NAMES[:7]}, 32)
    assert outcome.error.kind == "incomplete_names"
    assert outcome.session is None


def test_create_session_rejects_case_insensitive_duplicates():
    names = list(NAMES)
    names[7] = "p1"
    outcome = apply_command(None, {"type": "CREATE_SESSION", "names": names}, 32)
    assert outcome.error.kind == "duplicate_names"
    assert outcome.error.message == "duplicate names"
    assert outcome.session is None


def test_update_score_sets_only_target_match():
    session = _create()
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": 20}, 32
    )
    assert outcome.changed
    assert _score(outcome.session, "r1c1") == 20
    assert all(
        m.score_a is None for m in outcome.session.matches if m.id != "r1c1"
    )
    # previous record is untouched
    assert _score(session, "r1c1") is None


def test_update_score_clamps_into_scale():
    session = _create()
    high = apply_command(session, {"type": "UPDATE_SCORE", "matchId": "r2c1", "value": 50}, 32)
    assert _score(high.session, "r2c1") == 32
    low = apply_command(session, {"type": "UPDATE_SCORE", "matchId": "r2c1", "value": -5}, 24)
    assert _score(low.session, "r2c1") == 0
    small_scale = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r2c1", "value": 30}, 24
    )
    assert _score(small_scale.session, "r2c1") == 24


def test_update_score_accepts_numeric_strings_and_drops_fraction():
    session = _create()
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r3c2", "value": " 17 "}, 32
    )
    assert _score(outcome.session, "r3c2") == 17
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r3c2", "value": 12.7}, 32
    )
    assert _score(outcome.session, "r3c2") == 12


def test_update_score_clamps_huge_numbers():
    session = _create()
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": 10**400}, 32
    )
    assert outcome.changed
    assert _score(outcome.session, "r1c1") == 32
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": "1" + "0" * 400}, 24
    )
    assert _score(outcome.session, "r1c1") == 24
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": -(10**400)}, 24
    )
    assert _score(outcome.session, "r1c1") == 0


def test_update_score_ignores_non_numbers_and_unknown_matches():
    session = _create()
    for value in ("abc", "", None, True, float("nan")):
        outcome = apply_command(
            session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": value}, 32
        )
        assert outcome.ok
        assert not outcome.changed
        assert outcome.session is session
    outcome = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r9c1", "value": 10}, 32
    )
    assert not outcome.changed
    assert outcome.session is session


def test_update_score_without_session_is_noop():
    outcome = apply_command(None, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": 3}, 32)
    assert outcome.session is None
    assert not outcome.changed


def test_toggle_court_swap_twice_restores_order():
    session = _create()
    original_order = order_round(session.matches, 3, session.swap_by_round)

    swapped = apply_command(session, {"type": "TOGGLE_COURT_SWAP", "round": 3}, 32).session
    assert swapped.swap_by_round.is_swapped(3)
    assert not swapped.swap_by_round.is_swapped(2)
    assert [m.id for m in order_round(swapped.matches, 3, swapped.swap_by_round)] == [
        "r3c2",
        "r3c1",
    ]
    assert swapped.matches == session.matches

    restored = apply_command(swapped, {"type": "TOGGLE_COURT_SWAP", "round": 3}, 32).session
    assert not restored.swap_by_round.is_swapped(3)
    assert order_round(restored.matches, 3, restored.swap_by_round) == original_order
    assert restored.matches == session.matches


def test_toggle_court_swap_ignores_rounds_out_of_range():
    session = _create()
    for round_number in (0, 8, "2", None):
        outcome = apply_command(
            session, {"type": "TOGGLE_COURT_SWAP", "round": round_number}, 32
        )
        assert not outcome.changed
        assert outcome.session is session


def test_set_scoring_scale_reclamps_and_never_restores():
    session = _create()
    session = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": 30}, 32
    ).session
    session = apply_command(
        session, {"type": "UPDATE_SCORE", "matchId": "r1c2", "value": 10}, 32
    ).session

    down = apply_command(session, {"type": "SET_SCORING_SCALE", "scoringScale": 24}, 32)
    assert down.changed
    assert down.scoring_scale == 24
    assert _score(down.session, "r1c1") == 24
    assert _score(down.session, "r1c2") == 10
    assert _score(down.session, "r2c1") is None

    up = apply_command(down.session, {"type": "SET_SCORING_SCALE", "scoringScale": 32}, 24)
    assert up.scoring_scale == 32
    assert _score(up.session, "r1c1") == 24


def test_set_scoring_scale_without_session_updates_scale_only():
    outcome = apply_command(None, {"type": "SET_SCORING_SCALE", "scoringScale": "24"}, 32)
    assert outcome.changed
    assert outcome.scoring_scale == 24
    assert outcome.session is None


def test_set_scoring_scale_rejects_unsupported_values():
    session = _create()
    for value in (28, 0, "abc", True, None):
        outcome = apply_command(
            session, {"type": "SET_SCORING_SCALE", "scoringScale": value}, 32
        )
        assert not outcome.changed
        assert outcome.scoring_scale == 32


def test_reset_drops_session_and_keeps_scale():
    session = _create()
    outcome = apply_command(session, {"type": "RESET"}, 24)
    assert outcome.session is None
    assert outcome.scoring_scale == 24
    assert outcome.changed
    assert outcome.message == "Session reset."


def test_unknown_command_is_noop():
    session = _create()
    outcome = apply_command(session, {"type": "SHUFFLE"}, 32)
    assert outcome.ok
    assert not outcome.changed
    assert outcome.session is session


def test_helpers():
    assert default_session_name(date(2026, 1, 5)) == "Americano 05.01.2026"
    assert parse_scoring_scale("24") == 24
    assert parse_scoring_scale(32) == 32
    assert parse_scoring_scale("32.0") is None
    assert parse_scoring_scale("40") is None
    assert parse_scoring_scale(None) is None
    assert clamp_score(33, 32) == 32
    assert clamp_score(-1, 24) == 0
    assert clamp_score(7.9, 24) == 7


def test_full_session_flow_sequence():
    """Simulate CREATE -> SCORE -> SWAP -> SCALE -> RESET in pure core."""
    scale = 32
    outcome = apply_command(None, {"type": "CREATE_SESSION", "sessionName": "Test", "names": NAMES}, scale)
    session = outcome.session

    session = apply_command(session, {"type": "UPDATE_SCORE", "matchId": "r1c1", "value": 20}, scale).session
    session = apply_command(session, {"type": "TOGGLE_COURT_SWAP", "round": 1}, scale).session
    outcome = apply_command(session, {"type": "SET_SCORING_SCALE", "scoringScale": 24}, scale)
    session, scale = outcome.session, outcome.scoring_scale
    assert _score(session, "r1c1") == 20
    assert scale == 24
    assert session.swap_by_round.is_swapped(1)

    outcome = apply_command(session, {"type": "RESET"}, scale)
    assert outcome.session is None
    assert outcome.scoring_scale == 24
