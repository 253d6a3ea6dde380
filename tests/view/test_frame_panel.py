"""Widget tests for the frame bounds panel."""

import pytest

from pointtrigger.model.frame import FrameBounds
from pointtrigger.view.panels.frame_panel import FramePanel


@pytest.fixture
def panel(qtbot):
    widget = FramePanel(FrameBounds(0, 500, 0, 500))
    qtbot.addWidget(widget)
    return widget


class TestFramePanel:

    def test_initial_values_and_corners(self, panel):
        assert panel.values() == (0, 500, 0, 500)
        assert [lab.text() for lab in panel.corner_labels] == [
            "[0,500]", "[500,500]", "[0,0]", "[500,0]"
        ]

    def test_editing_a_field_emits_all_four_values(self, panel, qtbot):
        with qtbot.waitSignal(panel.bounds_edited, timeout=1000) as blocker:
            panel.spin("max_y").setValue(10)
        assert blocker.args == [0, 500, 0, 10]

    def test_show_bounds_writes_fields_without_emitting(self, panel, qtbot):
        with qtbot.assertNotEmitted(panel.bounds_edited):
            panel.show_bounds(FrameBounds(99, 100, -5, 5))
        assert panel.values() == (99, 100, -5, 5)
        assert panel.corner_labels[0].text() == "[99,5]"
        assert panel.corner_labels[3].text() == "[100,-5]"

    def test_show_bounds_below_field_floor_is_displayed_exactly(self, panel):
        floor = panel.spin("min_x").minimum()
        panel.show_bounds(FrameBounds(floor - 1, floor, 0, 500))

        assert panel.spin("min_x").value() == floor - 1
        assert panel.values() == (floor - 1, floor, 0, 500)
