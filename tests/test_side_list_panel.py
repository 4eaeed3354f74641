import pytest

from dockpanels.panels.context_state import ContextState, MainTab
from dockpanels.panels.side_list_panel import NoItemsError, SideListPanel, render_table


class FakeView:
    def __init__(self, name):
        self.name = name
        self.text = ""
        self.tabs = []
        self.tab_index = 0

    def clear(self):
        self.text = ""

    def write(self, text):
        self.text += text


class FakeHost:
    def __init__(self):
        self.main_view = FakeView("main")
        self.current_view = None
        self.needle = ""
        self.ignored = []
        self.queued = []
        self.simple_tasks = []
        self.focus_calls = []
        self.context_key = None
        self.click_line = 0

    def handle_click(self, view, item_count, on_line_selected):
        if self.click_line < item_count:
            on_line_selected(self.click_line)

    def new_simple_render_string_task(self, get_content):
        self.simple_tasks.append(get_content())
        return get_content

    def focus_y(self, selected_line, item_count, view):
        self.focus_calls.append((selected_line, item_count, view))

    def should_refresh(self, context_key):
        if context_key == self.context_key:
            return False
        self.context_key = context_key
        return True

    def get_main_view(self):
        return self.main_view

    def is_current_view(self, view):
        return view is self.current_view

    def filter_string(self, view):
        return self.needle

    def ignore_strings(self):
        return self.ignored

    def update(self, func):
        func()

    def queue_task(self, task):
        self.queued.append(task)


def _panel(host, **kwargs):
    tabs = [
        MainTab(key="logs", title="Logs", render=lambda item: ("logs", item)),
        MainTab(key="config", title="Config", render=lambda item: ("config", item)),
    ]
    state = ContextState(lambda: tabs, lambda item: f"things-{item}")
    kwargs.setdefault("context_state", state)
    kwargs.setdefault("no_items_message", "No things")
    return SideListPanel(host, FakeView("things"), lambda item: [item, item.upper()], **kwargs)


def test_set_items_applies_filter_and_sort():
    host = FakeHost()
    panel = _panel(host, filter=lambda item: item != "skip", sort=lambda a, b: a < b)
    panel.set_items(["web", "skip", "db", "cache"])
    assert panel.list.items() == ["cache", "db", "web"]
    assert panel.list.all_items() == ["web", "skip", "db", "cache"]


def test_ignore_strings_hide_matching_items():
    host = FakeHost()
    host.ignored = ["DB"]
    panel = _panel(host)
    panel.set_items(["web", "db", "dbx"])
    assert panel.list.items() == ["web"]


def test_filter_string_keeps_only_matches():
    host = FakeHost()
    host.needle = "we"
    panel = _panel(host)
    panel.set_items(["web", "db", "weasel"])
    assert panel.list.items() == ["web", "weasel"]


def test_get_selected_item_on_empty_raises_with_message():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items([])
    with pytest.raises(NoItemsError) as excinfo:
        panel.get_selected_item()
    assert str(excinfo.value) == panel.no_items_message


def test_handle_select_on_empty_builds_message_task():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items([])
    panel.handle_select()
    assert host.simple_tasks == [panel.no_items_message]
    assert host.queued == []


def test_handle_select_queues_render_once_per_context():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items(["web", "db"])
    panel.handle_select()
    panel.handle_select()
    assert host.queued == [("logs", "web")]
    assert host.context_key == "things-web-logs"
    assert host.main_view.tabs == ["Logs", "Config"]
    assert host.focus_calls[-1] == (0, 2, panel.view)


def test_next_line_renders_next_item():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items(["web", "db"])
    panel.handle_next_line()
    assert host.queued == [("logs", "db")]
    panel.handle_prev_line()
    assert host.queued[-1] == ("logs", "web")


def test_main_tab_switching_renders_other_tab():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items(["web"])
    panel.handle_next_main_tab()
    assert host.queued == [("config", "web")]
    assert host.main_view.tab_index == panel.context_state.main_tab_index
    panel.handle_prev_main_tab()
    assert host.queued[-1] == ("logs", "web")


def test_set_main_tab_index_without_context_state_is_ignored():
    host = FakeHost()
    panel = SideListPanel(host, FakeView("menu"), lambda item: [item])
    panel.set_items(["a"])
    panel.set_main_tab_index(3)
    panel.handle_next_main_tab()
    panel.handle_select()
    assert host.queued == []


def test_rerender_writes_table_and_selects_when_current():
    host = FakeHost()
    calls = []
    panel = _panel(host, on_rerender=lambda: calls.append(True))
    host.current_view = panel.view
    panel.set_items(["web", "db"])
    panel.rerender_list()
    assert panel.view.text == render_table([["web", "WEB"], ["db", "DB"]])
    assert calls == [True]
    assert host.queued == [("logs", "web")]


def test_rerender_does_not_select_when_not_current():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items(["web"])
    panel.rerender_list()
    assert host.queued == []
    assert "web" in panel.view.text


def test_click_selects_line_and_calls_on_click():
    host = FakeHost()
    clicked = []
    panel = _panel(host, on_click=clicked.append)
    panel.set_items(["web", "db", "cache"])
    host.click_line = 2
    panel.handle_click()
    assert panel.selected_idx == 2
    assert clicked == ["cache"]
    assert host.queued == [("logs", "cache")]


def test_click_on_empty_panel_does_not_call_on_click():
    host = FakeHost()
    clicked = []
    panel = _panel(host, on_click=clicked.append)
    panel.set_items([])
    panel.handle_click()
    assert clicked == []


def test_selection_clamped_after_refilter():
    host = FakeHost()
    panel = _panel(host)
    panel.set_items(["a", "b", "c"])
    panel.set_selected_line_idx(2)
    host.needle = "a"
    panel.filter_and_sort()
    assert panel.get_selected_item() == "a"


def test_hidden_and_filter_flags():
    host = FakeHost()
    assert _panel(host).is_hidden() is False
    assert _panel(host, hide=lambda: True).is_hidden() is True
    assert _panel(host, disable_filter=True).is_filter_disabled() is True
    assert _panel(host).is_filter_disabled() is False


def test_render_table_aligns_columns():
    rows = [["a", "x", "end"], ["longer", "yy", "z"]]
    lines = render_table(rows).split("\n")
    assert len(lines) == len(rows)
    second_column = {line.index(row[1]) for line, row in zip(lines, rows)}
    assert len(second_column) == 1
    assert all(line.endswith(row[-1]) for line, row in zip(lines, rows))


def test_render_table_ignores_colour_codes_for_width():
    coloured = "\x1b[32mab\x1b[0m"
    lines = render_table([[coloured, "1"], ["ab", "2"]]).split("\n")
    assert lines[0].replace("\x1b[32m", "").replace("\x1b[0m", "") == lines[1][:-1] + "1"


def test_render_table_empty_and_ragged():
    assert render_table([]) == ""
    with pytest.raises(ValueError):
        render_table([["a", "b"], ["c"]])