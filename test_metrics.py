from ovfdash.metrics import (
    Average,
    average,
    length_of_stay,
    postop_days,
    procedure_postop_averages,
    stay_by_path,
    time_to_surgery,
)
from ovfdash.models import PatientRecord


def _rec(**kw):
    kw.setdefault("id", "X")
    kw.setdefault("timestamp", "2023/10/01 10:00:00")
    return PatientRecord(**kw)


def test_length_of_stay_uses_follow_up_status_as_fallback():
    assert length_of_stay(_rec(admission_date="2023/10/10", hospitalization_period="14 days")) == 14
    assert length_of_stay(_rec(admission_date="2023/10/10", follow_up_status="2023/10/24")) == 14
    assert length_of_stay(_rec(admission_date="2023/10/10", follow_up_status="In Hospital")) is None


def test_postop_days_from_total_stay():
    r = _rec(admission_date="2023/10/01", surgery_date="2023/10/03", hospitalization_period="20")
    assert postop_days(r) == 18


def test_postop_days_from_discharge_date():
    r = _rec(admission_date="2023/10/01", surgery_date="2023/10/03", hospitalization_period="2023/10/17")
    assert postop_days(r) == 14


def test_postop_days_discards_impossible_values():
    # total stay shorter than the pre-operative interval
    r = _rec(admission_date="2023/10/01", surgery_date="2023/10/03", hospitalization_period="1")
    assert postop_days(r) is None
    # no surgery date to back out
    assert postop_days(_rec(admission_date="2023/10/01", hospitalization_period="20")) is None


def test_time_to_surgery():
    assert time_to_surgery(_rec(injury_date="2023/09/25", surgery_date="2023/10/02")) == 7
    assert time_to_surgery(_rec(injury_date="2023/09/25")) is None


def test_average_rounds_half_up_and_exposes_count():
    assert average([]) == Average(mean=0, count=0)
    assert average([1, 2, None]) == Average(mean=2, count=2)
    assert average([0]) == Average(mean=0, count=1)
    assert average([3, -1]) == Average(mean=3, count=1)


def test_procedure_postop_averages_highest_first():
    records = [
        _rec(procedure="BKP", surgery_date="2023/10/01", hospitalization_period="2023/10/11"),
        _rec(procedure="BKP", surgery_date="2023/10/01", hospitalization_period="2023/10/14"),
        _rec(procedure="PPS", surgery_date="2023/10/01", hospitalization_period="2023/10/21"),
        _rec(procedure="", surgery_date="2023/10/01", hospitalization_period="2023/12/01"),
        _rec(procedure="PPS", surgery_date="2023/10/01", follow_up_status="Pending"),
    ]
    assert procedure_postop_averages(records) == [
        {"name": "PPS", "value": 20, "count": 1},
        {"name": "BKP", "value": 12, "count": 2},
    ]


def test_stay_by_path_ignores_remarks():
    records = [
        _rec(outcome="手術", admission_date="2023/10/01", hospitalization_period="30"),
        _rec(outcome="Surgery", admission_date="2023/10/01", hospitalization_period="20"),
        _rec(outcome="保存", admission_date="2023/10/01", hospitalization_period="10"),
        _rec(outcome="", remarks="surgery later", admission_date="2023/10/01", hospitalization_period="4"),
    ]
    by_path = stay_by_path(records)
    assert by_path["surgical"] == Average(mean=25, count=2)
    assert by_path["non_surgical"] == Average(mean=7, count=2)
