# dockpanels

The model layer of a terminal dashboard for Docker. It holds what the side panels and the main view show, and how focus moves between views.

## What it provides

### `dockpanels.panels`

- `filtered_list.FilteredList` holds every item plus a filtered, sorted view of them. It offers `filter`, `sort` (given a `less(a, b)` function), `get`, `try_get`, `index_of`, `items`, `all_items` and `indices`.
- `context_state.ContextState` and `MainTab` track which tab of the main view is selected. They also build the context key that decides when the main view must be rendered again.
- `list_panel.ListPanel` is a filtered list with a clamped selected line.
- `side_list_panel.SideListPanel` joins these together. It sits behind a `GuiHost` protocol that you implement. It applies a panel filter, ignore strings and the typed filter, then sorts the items. It redraws the list through `render_table` and queues a render task when the selected context changes. `NoItemsError` is raised when nothing is selected.

### `dockpanels.presentation`

- `containers` gives the table cells for a container: `container_display_strings`, `display_ports`, `container_display_status`, `health_status`, `display_cpu_percentage` and `container_color`. It also has the `Color` enum and `colored`.
- `services.service_display_strings` gives the cells for a compose service.
- `resources` gives the cells for images, menu items, networks, projects and volumes, plus `format_decimal_bytes`.
- `stats.to_float` turns a statistics value into a float.

### `dockpanels.gui`

- `view_stack.ViewStack` is the focus stack. Pushing a side view resets it, pushing any view except `filter` drops popups, and each view appears at most once.
- `filter_state.FilterState` holds the typed-filter needle and the panel it applies to.
- `menu.MenuItem` and `prepare_menu_items` build popup menus. They append a cancel entry and pad every item to the same number of columns.
- `container_view`, `image_view`, `network_view` and `service_view` sort each panel (`container_less`, `image_less`, `network_less`, `service_less`) and give its context keys. They also give removal commands: `container_remove_commands`, `image_remove_options` and `service_remove_commands`.
- `service_view.select_service_commands` picks which custom commands apply to a service.
- `network_view.network_config_text` builds the text of a network's config tab.
- `container_details` formats a container's environment, mounts, ports and labels (`with_padding`, `format_map`, `container_env_rows` and related functions).

## What it does not do

- It draws nothing to the terminal. Views are objects you supply, with `clear()`, `write()`, `tabs` and `tab_index`.
- It does not talk to Docker or run commands. Containers, services, images and networks are any objects with the attributes that each module's docstring lists.
- It has no keybinding table and no command to start a dashboard.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dockpanels.panels.filtered_list import FilteredList

items = FilteredList([3, 1, 2])
items.filter(lambda value, index: value != 2)
items.sort(lambda a, b: a < b)
print(items.items())   # [1, 3]
print(len(items))      # 2
```

```python
from dockpanels.gui.view_stack import ViewStack

stack = ViewStack(
    side_view_names=["services", "containers"],
    popup_view_names=["menu", "confirmation"],
    initial_view_name="containers",
)
stack.push("services")
stack.push("menu")
print(stack.current_static_view_name())  # services
```