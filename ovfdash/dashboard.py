# ovfdash/dashboard.py

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .classify import (
    fracture_level_distribution,
    is_conservative,
    is_surgery_candidate,
    is_surgical_path,
    outcome_distribution,
)
from .metrics import (
    average,
    length_of_stay,
    postop_days,
    procedure_postop_averages,
    stay_by_path,
    time_to_surgery,
)
from .models import PatientRecord
from .views import ALL_YEARS, available_years, filter_by_text, filter_by_year, project_row

STAY_PATH_LABELS = {
    "surgical": "Surgery",
    "non_surgical": "Conservative / Other",
}


def build_dashboard(
    records: Sequence[PatientRecord],
    year: str = ALL_YEARS,
    query: str = "",
) -> Dict[str, Any]:
    """
    Everything one render of the dashboard needs, recomputed from scratch.

    Aggregates use the year-filtered records; only `rows` is further
    narrowed by the text query.

    Returns a dict with:
      - total, surgery_candidates, conservative
      - avg_stay, avg_postop_days, avg_time_to_surgery  ({"mean", "count"})
      - stay_by_path, procedure_postop        (chart rows)
      - outcome_distribution, fracture_levels (chart rows)
      - years, year, query, rows
    """
    in_year = filter_by_year(records, year)
    surgical = [r for r in in_year if is_surgical_path(r)]

    by_path = stay_by_path(in_year)
    stay_rows: List[Dict[str, Any]] = [
        {"name": STAY_PATH_LABELS[key], "value": avg.mean, "count": avg.count}
        for key, avg in by_path.items()
    ]

    visible = filter_by_text(in_year, query)

    return {
        "total": len(in_year),
        "surgery_candidates": sum(1 for r in in_year if is_surgery_candidate(r)),
        "conservative": sum(1 for r in in_year if is_conservative(r)),
        "avg_stay": average(length_of_stay(r) for r in in_year).to_dict(),
        "avg_postop_days": average(postop_days(r) for r in surgical).to_dict(),
        "avg_time_to_surgery": average(time_to_surgery(r) for r in surgical).to_dict(),
        "stay_by_path": stay_rows,
        "procedure_postop": procedure_postop_averages(surgical),
        "outcome_distribution": outcome_distribution(in_year),
        "fracture_levels": fracture_level_distribution(in_year),
        "years": available_years(records),
        "year": year or ALL_YEARS,
        "query": query,
        "rows": [project_row(r) for r in visible],
    }
