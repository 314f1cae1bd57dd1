import pytest

from core.models import Activity
from core.schema import LUMPSUM, PER_STUDENT, STUDENT_GROUPS
from engine.projection import project_final_reserve
from engine.runner import calculate_forecast

from tests.helpers import make_counts, make_scenario


def test_default_scenario_year0(default_scenario):
    forecast = calculate_forecast(default_scenario)
    y0 = forecast.years[0]

    assert y0.year == 2025
    assert y0.school_year == "2025/2026"
    assert y0.total_students == 542
    assert y0.income_contribution == pytest.approx(32520)
    assert y0.income_supplemental == 0
    assert y0.expense == pytest.approx(42498)
    assert y0.balance == y0.income - y0.expense
    assert y0.reserve == pytest.approx(19258.99 + y0.balance)
    assert y0.reserve == pytest.approx(9280.99)


def test_default_scenario_years(default_scenario):
    forecast = calculate_forecast(default_scenario)

    assert len(forecast.years) == 6
    assert [y.year for y in forecast.years] == [2025, 2026, 2027, 2028, 2029, 2030]
    assert [y.total_students for y in forecast.years] == [542, 551, 589, 593, 588, 569]
    assert forecast.years[1].expense == pytest.approx(40630.68)
    assert forecast.years[1].reserve == pytest.approx(1710.31)
    # reserve first drops below zero in the third year
    assert forecast.years[2].reserve < 0
    assert forecast.depletion_year == 2027
    assert forecast.final_reserve == pytest.approx(project_final_reserve(default_scenario))


def test_year_snapshots_are_pre_progression(default_scenario):
    forecast = calculate_forecast(default_scenario)
    assert forecast.years[0].student_counts == default_scenario.student_counts
    assert [sc.count for sc in forecast.years[1].student_counts] == [140, 75, 92, 84, 71, 62, 27]


def test_reserve_is_cumulative(default_scenario):
    forecast = calculate_forecast(default_scenario)
    running = default_scenario.settings.start_reserve
    for y in forecast.years:
        running += y.balance
        assert y.reserve == pytest.approx(running)


def test_zero_horizon_single_year(default_scenario):
    scenario = default_scenario.with_settings(years_ahead=0)
    forecast = calculate_forecast(scenario)

    assert len(forecast.years) == 1
    y0 = forecast.years[0]
    assert y0.reserve == pytest.approx(19258.99 + y0.income - y0.expense)


def test_depletion_year_locks_on_first_crossing():
    kamp = Activity(1, "Kamp", PER_STUDENT, 300.0, ("Groep 8",))
    scenario = make_scenario(
        counts=make_counts([0, 0, 0, 100, 0, 0, 10]),
        activities=[kamp],
        contribution=10,
        payment_rate=100,
        inflation_rate=0,
        years_ahead=3,
        kindergarten_intake=50,
        start_reserve=500,
    )
    forecast = calculate_forecast(scenario)
    reserves = [y.reserve for y in forecast.years]

    assert reserves[0] < 0       # year 0: groep 8 camp outweighs income
    assert reserves[1] >= 0      # recovered
    assert reserves[2] >= 0
    assert reserves[3] < 0       # the big cohort reaches groep 8
    assert forecast.depletion_year == 2025


def test_no_depletion_when_reserve_holds(default_scenario):
    forecast = calculate_forecast(default_scenario.with_settings(contribution=120))
    assert forecast.depletion_year is None


def test_supplemental_income_zero_without_selection(default_scenario):
    scenario = default_scenario.with_settings(
        supplemental_activity_codes=(), supplemental_percentage=80
    )
    forecast = calculate_forecast(scenario)
    assert all(y.income_supplemental == 0 for y in forecast.years)


def test_supplemental_income_follows_selection(default_scenario):
    scenario = default_scenario.with_settings(
        supplemental_activity_codes=(413, 12345), supplemental_percentage=50
    )
    forecast = calculate_forecast(scenario)
    y0 = forecast.years[0]
    # Kamp groep 8: 57 x 70, half charged, 80% pays; unknown code ignored
    assert y0.income_supplemental == pytest.approx(57 * 70 * 0.5 * 0.8)
    assert y0.income == pytest.approx(y0.income_contribution + y0.income_supplemental)


def test_zero_enrollment_does_not_raise():
    scenario = make_scenario(counts=make_counts([0] * 7), kindergarten_intake=0)
    forecast = calculate_forecast(scenario)
    for y in forecast.years:
        assert y.total_students == 0
        assert y.income == 0
        per_student = [e for e in y.expense_per_activity if e.activity.activity_type == PER_STUDENT]
        assert all(e.cost == 0 for e in per_student)
    assert all(g.cost == 0 for g in forecast.cost_per_student_per_group)


def test_negative_contribution_is_computed_not_rejected(default_scenario):
    forecast = calculate_forecast(default_scenario.with_settings(contribution=-10))
    assert forecast.years[0].income_contribution == pytest.approx(542 * -10 * 0.8)


def test_cost_breakdown_uses_current_counts_only(default_scenario):
    forecast = calculate_forecast(default_scenario)
    groups = [g.group for g in forecast.cost_per_student_per_group]
    assert groups == list(STUDENT_GROUPS)

    # with inflation and a long horizon the breakdown is unchanged
    other = calculate_forecast(default_scenario.with_settings(inflation_rate=10, years_ahead=10))
    assert other.cost_per_student_per_group == forecast.cost_per_student_per_group


def test_per_group_costs_sum_to_total_when_activities_cover_all_groups():
    activities = [
        Activity(1, "Feest", LUMPSUM, 5900.0),
        Activity(2, "Uitje", LUMPSUM, 1234.56),
        Activity(3, "Pasen", PER_STUDENT, 3.0),
    ]
    scenario = make_scenario(activities=activities)
    forecast = calculate_forecast(scenario)
    counts = {sc.group: sc.count for sc in scenario.student_counts}

    distributed = sum(g.cost * counts[g.group] for g in forecast.cost_per_student_per_group)
    assert distributed == pytest.approx(forecast.years[0].expense)


def test_to_dataframe(default_scenario):
    forecast = calculate_forecast(default_scenario)
    df = forecast.to_dataframe()
    assert list(df["year"]) == [2025, 2026, 2027, 2028, 2029, 2030]
    assert df["reserve"].iloc[-1] == pytest.approx(forecast.final_reserve)

    matrix = forecast.expenses_dataframe()
    assert len(matrix) == 16
    assert matrix[2025].sum() == pytest.approx(42498)
