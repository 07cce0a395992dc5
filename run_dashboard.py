# run_dashboard.py

import sys
import json
import logging

from ovfdash.dashboard import build_dashboard
from ovfdash.data_client import load_patients
from ovfdash.views import ALL_YEARS


def main() -> None:
    if len(sys.argv) > 3 or (len(sys.argv) > 1 and sys.argv[1] in ("-h", "--help")):
        print("Usage: python run_dashboard.py [year|All] [search text]")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    year = sys.argv[1] if len(sys.argv) > 1 else ALL_YEARS
    query = sys.argv[2] if len(sys.argv) > 2 else ""

    print("Loading patient records...")
    records = load_patients()
    view = build_dashboard(records, year=year, query=query)

    print("\n=== Summary ===")
    print(f"Year:                       {view['year']}  (available: {', '.join(view['years']) or '-'})")
    print(f"Total consults:             {view['total']}")
    print(f"Surgery candidates:         {view['surgery_candidates']}")
    print(f"Observation / Conservative: {view['conservative']}")

    print("\n=== Durations (mean days, n) ===")
    for label, key in (
        ("Hospitalization", "avg_stay"),
        ("Post-op", "avg_postop_days"),
        ("Injury to surgery", "avg_time_to_surgery"),
    ):
        avg = view[key]
        print(f"{label:<20} {avg['mean']:>4}  (n={avg['count']})")
    for row in view["stay_by_path"]:
        print(f"  stay, {row['name']:<20} {row['value']:>4}  (n={row['count']})")
    for row in view["procedure_postop"]:
        print(f"  post-op, {row['name']:<17} {row['value']:>4}  (n={row['count']})")

    print("\n=== Outcome Distribution ===")
    print(json.dumps(view["outcome_distribution"], indent=2, ensure_ascii=False))

    print("\n=== Fracture Levels ===")
    print(json.dumps(view["fracture_levels"], indent=2, ensure_ascii=False))

    print(f"\n=== Patients ({len(view['rows'])}) ===")
    for r in view["rows"]:
        print(
            f"{r['id']:<8} {r['age_gender']:<14} {r['fracture_level']:<10} "
            f"{r['admission_date']:<12} {r['hospitalization']:<9} {r['outcome']:<14} {r['status']}"
        )


if __name__ == "__main__":
    main()
