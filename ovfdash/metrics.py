# ovfdash/metrics.py

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from .classify import is_surgical_path
from .durations import day_count, normalize_duration
from .models import PatientRecord


@dataclass(frozen=True)
class Average:
    """
    Rounded mean of the contributing values, and how many there were.
    mean is 0 when count is 0; check count to tell "no data" from "0 days".
    """
    mean: int
    count: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def average(values: Iterable[Optional[int]]) -> Average:
    """
    Average of the determinate, non-negative values; None is skipped.
    """
    kept = [v for v in values if v is not None and v >= 0]
    if not kept:
        return Average(mean=0, count=0)
    return Average(mean=_round_half_up(sum(kept) / len(kept)), count=len(kept))


def discharge_value(record: PatientRecord) -> str:
    """
    hospitalizationPeriod, or followUpStatus when that column is empty.
    Either may hold a day count or a discharge date.
    """
    return record.hospitalization_period or record.follow_up_status


def length_of_stay(record: PatientRecord) -> Optional[int]:
    return normalize_duration(record.admission_date, discharge_value(record), record.timestamp)


def preop_days(record: PatientRecord) -> Optional[int]:
    return normalize_duration(record.admission_date, record.surgery_date, record.timestamp)


def postop_days(record: PatientRecord) -> Optional[int]:
    """
    Days from surgery to discharge.

    When the discharge side is a plain day count it is the total stay,
    so the admission->surgery interval is subtracted from it.
    Otherwise the gap surgery->discharge is measured directly.
    """
    value = discharge_value(record)
    total = day_count(value)
    if total is not None:
        pre = preop_days(record)
        if pre is None:
            return None
        post = total - pre
        return post if post >= 0 else None

    return normalize_duration(record.surgery_date, value, record.timestamp)


def time_to_surgery(record: PatientRecord) -> Optional[int]:
    return normalize_duration(record.injury_date, record.surgery_date, record.timestamp)


def stay_by_path(records: Iterable[PatientRecord]) -> Dict[str, Average]:
    """
    Average length of stay for the surgical and the non-surgical side
    of the outcome partition.
    """
    surgical: List[Optional[int]] = []
    other: List[Optional[int]] = []
    for r in records:
        (surgical if is_surgical_path(r) else other).append(length_of_stay(r))
    return {"surgical": average(surgical), "non_surgical": average(other)}


def procedure_postop_averages(records: Iterable[PatientRecord]) -> List[Dict[str, Any]]:
    """
    Post-operative days per procedure (e.g. BKP, PPS), highest mean first.
    Records without a procedure or without a usable post-op value are skipped.
    """
    totals: Dict[str, List[int]] = {}
    for r in records:
        name = r.procedure.strip()
        if not name:
            continue
        days = postop_days(r)
        if days is None:
            continue
        acc = totals.setdefault(name, [0, 0])
        acc[0] += days
        acc[1] += 1

    rows = [
        {"name": name, "value": _round_half_up(s / n), "count": n}
        for name, (s, n) in totals.items()
    ]
    rows.sort(key=lambda row: row["value"], reverse=True)
    return rows
