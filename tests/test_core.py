import datetime as dt

import pytest

from core.defaults import (
    DEFAULT_ACTIVITIES,
    DEFAULT_SETTINGS,
    PRESET_SCENARIOS,
    clone_scenario,
    create_default_scenario,
    create_preset_scenario,
)
from core.models import Activity, StudentCount, complete_snapshot
from core.schema import LUMPSUM, STUDENT_GROUPS
from core.utils import (
    parse_start_year,
    round_half_away,
    round_half_away_int,
    school_year_label,
    students_for_groups,
    total_students,
)

from tests.helpers import make_counts


def test_round_half_away_from_zero():
    assert round_half_away_int(74.5) == 75
    assert round_half_away_int(2.5) == 3
    assert round_half_away_int(0.5) == 1
    assert round_half_away_int(-0.5) == -1
    assert round_half_away_int(66.4) == 66
    assert list(round_half_away([1.25, -1.25], 1)) == [1.3, -1.3]


def test_parse_start_year_and_labels():
    assert parse_start_year("2025/2026") == 2025
    assert parse_start_year("garbage", today=dt.date(2031, 1, 1)) == 2031
    assert school_year_label(2025) == "2025/2026"
    assert school_year_label(2025, 3) == "2028/2029"


def test_enrollment_helpers():
    counts = make_counts([149, 92, 84, 71, 62, 27, 57])
    assert total_students(counts) == 542
    assert students_for_groups(counts, ["Groep 8"]) == 57
    assert students_for_groups(counts, ["Groep 4", "Groep 5"]) == 155
    assert students_for_groups(counts, []) == 0


def test_complete_snapshot_zero_fills_and_orders():
    snap = complete_snapshot([StudentCount("Groep 8", 5), StudentCount("Groep 3", 2)])
    assert [sc.group for sc in snap] == list(STUDENT_GROUPS)
    assert [sc.count for sc in snap] == [0, 2, 0, 0, 0, 0, 5]


def test_complete_snapshot_first_duplicate_wins():
    snap = complete_snapshot([StudentCount("Groep 3", 2), StudentCount("Groep 3", 9)])
    assert snap[1].count == 2


def test_complete_snapshot_rejects_unknown_group():
    with pytest.raises(ValueError):
        complete_snapshot([StudentCount("Groep 9", 1)])


def test_activity_rejects_unknown_type():
    with pytest.raises(ValueError):
        Activity(1, "x", "Monthly", 10.0)


def test_activity_groups_are_tuples():
    a = Activity(1, "x", LUMPSUM, 10.0, ["Groep 3"])
    assert a.groups == ("Groep 3",)
    assert a.applies_to("Groep 3")
    assert not a.applies_to("Groep 4")


def test_default_catalog():
    assert len(DEFAULT_ACTIVITIES) == 16
    assert len({a.code for a in DEFAULT_ACTIVITIES}) == 16
    assert DEFAULT_SETTINGS.start_reserve == 19258.99


def test_create_default_scenario():
    s = create_default_scenario(today=dt.date(2025, 9, 1))
    assert s.school_year == "2025/2026"
    assert s.active
    assert total_students(s.student_counts) == 542
    assert s.settings == DEFAULT_SETTINGS


def test_presets():
    s = create_preset_scenario("conservatief")
    assert s.name == "Conservatief"
    assert s.settings.contribution == 70
    assert s.settings.payment_rate == 75
    assert s.settings.inflation_rate == 3
    assert set(PRESET_SCENARIOS) == {"conservatief", "realistisch", "optimistisch"}
    with pytest.raises(ValueError):
        create_preset_scenario("pessimistisch")


def test_clone_scenario_gets_new_identity():
    original = create_default_scenario()
    clone = clone_scenario(original, "Kopie")
    assert clone.id != original.id
    assert clone.name == "Kopie"
    assert clone.active is False
    assert clone.activities == original.activities
    assert clone.student_counts == original.student_counts


def test_with_settings_leaves_original_untouched():
    original = create_default_scenario()
    changed = original.with_settings(contribution=90)
    assert changed.settings.contribution == 90
    assert original.settings.contribution == 75
