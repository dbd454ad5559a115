"""Tests for the headless select controller."""

from unittest.mock import MagicMock

import pytest

from conftest import SignalRecorder

pytestmark = pytest.mark.unit_controller


# selection


def test_initial_state(select):
    assert select.value == []
    assert [i.id for i in select.items] == ["F1", "F2", "F3"]
    assert select.filtered == select.items
    assert select.active_index == -1
    assert select.is_open is False


def test_multi_select_scenario(select, recorder, items):
    select.toggle_select("F1")
    assert select.value == ["F1"]
    assert len(recorder.changed) == 1
    assert recorder.changed[0] == {"value": ["F1"], "items": [items[0]]}

    select.toggle_select("F2")
    assert set(select.value) == {"F1", "F2"}
    assert len(recorder.changed) == 2

    select.apply_filter("bbb1")
    assert [i.id for i in select.filtered] == ["F3"]
    assert select.active_index == -1
    assert recorder.searched == [{"query": "bbb1"}]
    assert len(recorder.changed) == 2

    select.clear_selection()
    assert select.value == []
    assert len(recorder.changed) == 3
    assert recorder.changed[-1] == {"value": [], "items": []}


def test_single_select_scenario(make_select):
    select = make_select(multi=False)
    recorder = SignalRecorder(select)
    select.open()
    select.toggle_select("F1")
    assert select.is_open is False
    select.open()
    select.toggle_select("F2")
    assert select.value == ["F2"]
    assert select.is_open is False
    assert len(recorder.changed) == 2
    assert len(recorder.closed) == 2


def test_single_select_never_holds_more_than_one(make_select):
    select = make_select(multi=False)
    for item_id in ["F1", "F2", "F2", "F3", "F1", "F3"]:
        select.toggle_select(item_id)
        assert len(select.value) <= 1
    assert select.value == ["F3"]


def test_multi_toggle_twice_deselects(select, recorder):
    select.toggle_select("F1")
    select.toggle_select("F1")
    assert select.value == []
    assert len(recorder.changed) == 2


def test_multi_toggle_does_not_close(select):
    select.open()
    select.toggle_select("F1")
    assert select.is_open is True


@pytest.mark.parametrize("item_id", [None, "", "missing"])
def test_toggle_invalid_id_is_noop(select, recorder, item_id):
    select.toggle_select(item_id)
    assert select.value == []
    assert recorder.changed == []


def test_change_items_follow_item_order(select, recorder, items):
    select.toggle_select("F3")
    select.toggle_select("F1")
    assert select.value == ["F3", "F1"]
    assert recorder.changed[-1]["items"] == [items[0], items[2]]
    assert [i.id for i in select.selected_items] == ["F1", "F3"]


def test_clear_empty_selection_does_not_notify(select, recorder):
    select.clear_selection()
    assert recorder.changed == []
    assert recorder.notified == []


def test_set_value_drops_unknown_and_always_notifies(select, recorder):
    select.set_value(["F2", "nope", "F1"])
    assert select.value == ["F2", "F1"]
    select.set_value(["F2", "F1"])
    assert select.value == ["F2", "F1"]
    assert len(recorder.changed) == 2


def test_value_setter(select, recorder):
    select.value = ["F3"]
    assert select.value == ["F3"]
    assert len(recorder.changed) == 1


@pytest.mark.parametrize("ids", [None, "F1", 5])
def test_set_value_non_list_clears(select, ids):
    select.toggle_select("F2")
    select.value = ids
    assert select.value == []


def test_set_value_single_mode_keeps_first(make_select):
    select = make_select(multi=False)
    select.value = ["F2", "F3"]
    assert select.value == ["F2"]


def test_value_is_a_copy(select):
    select.toggle_select("F1")
    value = select.value
    value.append("F2")
    assert select.value == ["F1"]


# item store


def test_set_items_clears_and_notifies_once(select, recorder):
    select.toggle_select("F1")
    select.apply_filter("f")
    select.move_active(1)
    recorder.changed.clear()

    select.set_items([{"id": "N1", "label": "New"}])
    assert select.value == []
    assert [i.id for i in select.items] == ["N1"]
    assert select.filtered == select.items
    assert select.active_index == -1
    assert select.query == ""
    assert len(recorder.changed) == 1


def test_set_items_empty_still_notifies(select, recorder):
    select.set_items([])
    assert select.items == []
    assert len(recorder.changed) == 1
    select.set_items(None)
    assert len(recorder.changed) == 2


def test_set_items_prunes_missing_ids(select):
    select.toggle_select("F1")
    select.set_items([{"id": "F1", "label": "still here"}])
    assert select.value == []


# filtering


def test_filter_empty_restores_items(select):
    select.apply_filter("bbb")
    select.apply_filter("   ")
    assert select.filtered == select.items
    assert select.active_index == -1


def test_filtered_snapshot_is_not_aliased(select):
    before = select.filtered
    select.set_items([{"id": "Z", "label": "Z"}])
    assert [i.id for i in before] == ["F1", "F2", "F3"]


def test_filter_resets_active_and_keeps_state(select, recorder):
    select.open()
    select.toggle_select("F1")
    select.move_active(1)
    changes = len(recorder.changed)

    select.apply_filter("F")
    assert select.active_index == -1
    assert select.is_open is True
    assert select.value == ["F1"]
    assert len(recorder.changed) == changes
    assert recorder.searched == [{"query": "f"}]


def test_clear_search_resets_and_closes(select, recorder):
    select.open()
    select.apply_filter("bbb")
    select.clear_search()
    assert select.filtered == select.items
    assert select.is_open is False
    assert recorder.searched[-1] == {"query": ""}


# navigation


def test_move_active_from_unset(select):
    select.move_active(1)
    assert select.active_index == 0
    select.apply_filter("")
    select.move_active(-1)
    assert select.active_index == 2


def test_move_active_wraps(select):
    count = len(select.filtered)
    for _ in range(count):
        select.move_active(1)
    assert select.active_index == count - 1
    select.move_active(1)
    assert select.active_index == 0
    select.move_active(-1)
    assert select.active_index == count - 1


def test_move_active_cycles_back_to_first(select):
    select.move_active(1)
    seen = [select.active_index]
    for _ in range(len(select.filtered)):
        select.move_active(1)
        seen.append(select.active_index)
        assert -1 <= select.active_index < len(select.filtered)
    assert seen == [0, 1, 2, 0]


def test_move_active_empty_is_noop(select):
    select.apply_filter("nothing matches")
    select.move_active(1)
    assert select.active_index == -1


def test_active_item(select):
    assert select.active_item is None
    select.move_active(-1)
    assert select.active_item.id == "F3"


# lifecycle


def test_open_close_idempotent(select, recorder):
    select.open()
    select.open()
    assert recorder.opened == [{}]
    select.close()
    select.close()
    assert recorder.closed == [{}]


def test_toggle_dispatches(select, recorder):
    select.toggle()
    assert select.is_open is True
    select.toggle()
    assert select.is_open is False
    assert len(recorder.opened) == 1
    assert len(recorder.closed) == 1


def test_open_resets_active_and_requests_side_effects(select):
    focus = MagicMock()
    reposition = MagicMock()
    select.view.focusRequested.connect(lambda: focus())
    select.view.repositionRequested.connect(lambda: reposition())

    select.move_active(1)
    select.open()
    assert select.active_index == -1
    focus.assert_called_once()
    reposition.assert_called_once()


def test_close_keeps_other_state(select):
    select.open()
    select.toggle_select("F2")
    select.move_active(1)
    select.close()
    assert select.active_index == 0
    assert select.value == ["F2"]


# row interaction


def test_select_row_sets_active_in_multi_mode(select):
    select.open()
    select.select_row(2)
    assert select.value == ["F3"]
    assert select.active_index == 2


def test_select_row_out_of_range(select, recorder):
    select.select_row(3)
    select.select_row(-1)
    assert recorder.changed == []


def test_select_row_uses_filtered_view(select):
    select.apply_filter("bbb")
    select.select_row(0)
    assert select.value == ["F3"]


def test_select_active(select):
    select.select_active()
    assert select.value == []
    select.move_active(1)
    select.select_active()
    assert select.value == ["F1"]


# notifier


def test_on_change_receives_raw_records(make_select, items):
    on_change = MagicMock()
    select = make_select(on_change=on_change)
    select.toggle_select("F2")
    on_change.assert_called_once_with([items[1]])


def test_on_change_failure_is_contained(make_select):
    on_change = MagicMock(side_effect=RuntimeError("boom"))
    select = make_select(on_change=on_change)
    recorder = SignalRecorder(select)
    select.toggle_select("F1")
    assert select.value == ["F1"]
    assert len(recorder.changed) == 1


def test_generic_notifications_are_prefixed(select, recorder):
    select.open()
    select.apply_filter("x")
    select.toggle_select("F1")
    select.close()
    names = [name for name, _ in recorder.notified]
    assert names == ["smart-select:open", "smart-select:search",
                     "smart-select:change", "smart-select:close"]


def test_render_requests(select):
    summaries = []
    lists = []
    select.view.summaryChanged.connect(lambda state: summaries.append(state))
    select.view.listChanged.connect(
        lambda state, query: lists.append((state, query)))

    select.toggle_select("F1")
    assert summaries[-1]["selected"] == ["F1"]
    assert [i.id for i in summaries[-1]["selected_items"]] == ["F1"]

    select.apply_filter("aa")
    state, query = lists[-1]
    assert query == "aa"
    assert [i.id for i in state["filtered"]] == ["F2"]


def test_snapshot_is_detached(select):
    state = select.snapshot()
    select.toggle_select("F1")
    assert state["selected"] == []
    assert state["multi"] is True
    assert state["label"] == "Smart Select"


def test_has_selection(select):
    assert select.has_selection is False
    select.toggle_select("F2")
    assert select.has_selection is True
    select.clear_selection()
    assert select.has_selection is False


def test_failing_side_effect_does_not_undo_open(select, recorder):
    focus = MagicMock()

    def broken_reposition():
        raise RuntimeError("cannot measure control")

    select.view.repositionRequested.connect(broken_reposition)
    select.view.focusRequested.connect(lambda: focus())
    select.open()
    assert select.is_open is True
    assert recorder.opened == [{}]
    focus.assert_called_once()
