from eggshot.state import AppState


def test_members_in_declared_order():
    rebuilt = [AppState(state.value) for state in AppState]
    assert rebuilt == [AppState.MENU, AppState.IN_GAME]


def test_lookup_by_name_and_value_round_trips():
    for state in AppState:
        assert AppState[state.name] is state
        assert AppState(state.value) is state


def test_states_are_hashable_and_distinct():
    menu = AppState(AppState.MENU.value)
    in_game = AppState(AppState.IN_GAME.value)
    assert len({menu, in_game}) == 2
    assert menu is AppState.MENU
    assert in_game is AppState.IN_GAME
    assert menu != in_game