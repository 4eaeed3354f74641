import pytest

from dockpanels.panels.context_state import ContextState, MainTab


def _tabs():
    return [
        MainTab(key="logs", title="Logs", render=lambda item: f"logs of {item}"),
        MainTab(key="stats", title="Stats", render=lambda item: f"stats of {item}"),
        MainTab(key="env", title="Env", render=lambda item: f"env of {item}"),
    ]


def _state(tabs=None):
    tabs = _tabs() if tabs is None else tabs
    return ContextState(lambda: tabs, lambda item: f"item-{item}"), tabs


def test_titles_follow_tabs():
    state, tabs = _state()
    assert state.main_tab_titles() == [tab.title for tab in tabs]


def test_initial_tab_is_first():
    state, tabs = _state()
    assert state.current_main_tab() is tabs[0]


def test_context_key_joins_item_key_and_tab_key():
    state, _ = _state()
    assert state.current_context_key("abc") == "item-abc-logs"
    state.next_main_tab()
    assert state.current_context_key("abc") == "item-abc-stats"


def test_next_wraps_round():
    state, tabs = _state()
    seen = []
    for _ in range(len(tabs)):
        state.next_main_tab()
        seen.append(state.current_main_tab())
    assert seen == tabs[1:] + tabs[:1]


def test_prev_wraps_round():
    state, tabs = _state()
    state.prev_main_tab()
    assert state.current_main_tab() is tabs[-1]


def test_next_then_prev_is_identity():
    state, tabs = _state()
    state.set_main_tab_index(1)
    state.next_main_tab()
    state.prev_main_tab()
    assert state.current_main_tab() is tabs[1]


def test_empty_tabs_do_not_move():
    state, _ = _state(tabs=[])
    state.next_main_tab()
    state.prev_main_tab()
    assert state.main_tab_index == 0
    assert state.main_tab_titles() == []


def test_out_of_range_index_raises():
    state, tabs = _state()
    state.set_main_tab_index(len(tabs))
    with pytest.raises(IndexError):
        state.current_main_tab()


def test_render_uses_selected_tab():
    state, _ = _state()
    state.set_main_tab_index(2)
    assert state.current_main_tab().render("web") == "env of web"