# ovfdash/views.py

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .classify import is_surgical_path, split_multi
from .durations import parse_full_date
from .metrics import length_of_stay
from .models import PatientRecord

ALL_YEARS = "All"
PLACEHOLDER = "-"


def extract_year(timestamp: str) -> Optional[str]:
    dt = parse_full_date((timestamp or "").strip())
    return str(dt.year) if dt else None


def available_years(records: Iterable[PatientRecord]) -> List[str]:
    """
    Distinct submission years, newest first.
    Records with an unparseable timestamp contribute nothing here.
    """
    years = {extract_year(r.timestamp) for r in records}
    return sorted((y for y in years if y is not None), reverse=True)


def filter_by_year(records: Iterable[PatientRecord], year: str = ALL_YEARS) -> List[PatientRecord]:
    if not year or year == ALL_YEARS:
        return list(records)
    return [r for r in records if extract_year(r.timestamp) == year]


def filter_by_text(records: Iterable[PatientRecord], query: str = "") -> List[PatientRecord]:
    """
    Case-insensitive substring search over id, outcome and newFractures.
    """
    if not query:
        return list(records)
    q = query.lower()
    return [
        r for r in records
        if q in r.id.lower() or q in r.outcome.lower() or q in r.new_fractures.lower()
    ]


def mri_links(value: str) -> List[str]:
    return [t for t in split_multi(value) if t.startswith("http")]


def project_row(record: PatientRecord) -> Dict[str, Any]:
    """
    One table row for display. Unknown values become PLACEHOLDER.
    """
    stay = length_of_stay(record)
    age = "" if record.age is None else str(record.age)

    return {
        "id": record.id,
        "age_gender": f"{age} / {record.gender}",
        "fracture_level": record.new_fractures or PLACEHOLDER,
        "admission_date": record.admission_date,
        "hospitalization": PLACEHOLDER if stay is None else f"{stay} days",
        "hospitalization_days": stay,
        "procedure": record.procedure or PLACEHOLDER,
        "mri_links": mri_links(record.mri_image),
        "outcome": record.outcome,
        "surgical": is_surgical_path(record),
        "status": record.follow_up_status,
    }
