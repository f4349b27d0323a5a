import pytest

from repovis.key import FileKey, FileKeyEntry


def measure(text):
    return len(text) * 10.0


WHITE = (1.0, 1.0, 1.0)


def test_short_extension_is_not_truncated():
    entry = FileKeyEntry("py", WHITE, measure)
    assert entry.display_ext == "py"


def test_long_extension_is_truncated_to_fit():
    ext = "averyverylongextension"
    entry = FileKeyEntry(ext, WHITE, measure)
    assert entry.display_ext.endswith("...")
    prefix = entry.display_ext[: -len("...")]
    assert ext.startswith(prefix)
    assert measure(prefix) <= entry.width - 15.0
    assert measure(ext[: len(prefix) + 1]) > entry.width - 15.0


def test_new_entry_is_finished_until_counted():
    entry = FileKeyEntry("c", WHITE, measure)
    assert entry.is_finished()
    entry.inc()
    assert not entry.is_finished()
    entry.dec()
    assert entry.is_finished()


def test_entry_fades_in_and_out():
    entry = FileKeyEntry("c", WHITE, measure)
    entry.inc()
    entry.logic(0.5)
    assert entry.alpha == pytest.approx(0.5)
    entry.logic(2.0)
    assert entry.alpha == 1.0
    entry.dec()
    entry.logic(5.0)
    assert entry.alpha == 0.0


def test_hidden_entry_fades_out():
    entry = FileKeyEntry("c", WHITE, measure)
    entry.inc()
    entry.logic(1.0)
    entry.show = False
    entry.logic(0.25)
    assert entry.alpha == pytest.approx(0.75)


def test_entry_jumps_then_slides_to_destination():
    entry = FileKeyEntry("c", WHITE, measure)
    entry.inc()
    entry.set_dest_y(20.0)
    entry.logic(0.1)
    assert entry.pos_y == 20.0
    entry.set_dest_y(60.0)
    entry.logic(0.5)
    assert 20.0 < entry.pos_y < 60.0
    entry.logic(0.6)
    assert entry.pos_y == 60.0
    assert entry.pos[1] == 60.0


def test_key_sorts_by_count_then_name():
    key = FileKey(1.0, 600, measure)
    for ext in ("py", "c", "c", "b", "a"):
        key.inc(ext, WHITE)
    key.logic(1.0)
    assert [e.ext for e in key.active] == ["c", "a", "b", "py"]
    assert key.active[0].dest_y == 20.0
    ys = [e.dest_y for e in key.active]
    assert ys == sorted(ys)


def test_key_limits_visible_entries_by_display_height():
    key = FileKey(1.0, 190, measure)
    for ext in ("a", "b", "c"):
        key.inc(ext, WHITE)
    key.logic(1.0)
    assert len(key.active) == 2


def test_finished_entries_are_removed():
    key = FileKey(1.0, 600, measure)
    key.inc("c", WHITE)
    key.logic(1.0)
    assert "c" in key.entries
    key.dec("c")
    key.logic(1.0)
    assert key.active[0].alpha == 0.0
    key.logic(1.0)
    assert "c" not in key.entries
    assert key.active == []


def test_dec_of_unknown_extension_is_ignored():
    key = FileKey(1.0, 600, measure)
    key.dec("missing")
    assert key.entries == {}


def test_clear_zeroes_active_counts():
    key = FileKey(1.0, 600, measure)
    key.inc("c", WHITE)
    key.inc("c", WHITE)
    key.logic(1.0)
    key.clear()
    assert key.entries["c"].count == 0
    assert key.interval_remaining == 0.0


def test_set_show_hides_entries_and_stops_recalculation():
    key = FileKey(1.0, 600, measure)
    key.inc("c", WHITE)
    key.logic(1.0)
    key.set_show(False)
    assert all(not e.show for e in key.active)
    key.inc("py", WHITE)
    key.logic(1.0)
    assert [e.ext for e in key.active] == ["c"]