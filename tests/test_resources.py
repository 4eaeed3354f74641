import re
from types import SimpleNamespace

import pytest

from dockpanels.presentation.resources import (
    format_decimal_bytes,
    image_display_strings,
    menu_item_display_strings,
    network_display_strings,
    project_display_strings,
    volume_display_strings,
)

SIZE = re.compile(r"^(\d+\.\d{2})(B|kB|MB|GB|TB|PB|EB|ZB|YB)$")


def test_zero_bytes():
    assert format_decimal_bytes(0) == "0.00B"


@pytest.mark.parametrize(
    "size", [1, 999, 1000, 1001, 999_999, 1_000_000, 123_456_789, 10**15, 10**24]
)
def test_format_shape_and_range(size):
    match = SIZE.match(format_decimal_bytes(size))
    assert match is not None
    assert float(match.group(1)) < 1000 or match.group(2) == "B"


def test_units_grow_with_size():
    units = [SIZE.match(format_decimal_bytes(10**n)).group(2) for n in (2, 5, 8, 11)]
    assert units == ["B", "kB", "MB", "GB"]


def test_huge_size():
    assert format_decimal_bytes(10**30) == "a lot"


def test_image_cells():
    image = SimpleNamespace(name="nginx", tag="latest", size=0)
    assert image_display_strings(image) == ["nginx", "latest", format_decimal_bytes(0)]


def test_simple_resource_cells():
    assert menu_item_display_strings(SimpleNamespace(label_columns=["a", "b"])) == ["a", "b"]
    assert network_display_strings(SimpleNamespace(driver="bridge", name="net")) == [
        "bridge",
        "net",
    ]
    assert project_display_strings(SimpleNamespace(name="proj")) == ["proj"]
    assert volume_display_strings(SimpleNamespace(driver="local", name="vol")) == [
        "local",
        "vol",
    ]