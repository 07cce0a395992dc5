# ovfdash/presentation.py

from __future__ import annotations

from typing import Any, Dict, List, Tuple


def outcome_pie_spec(distribution: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Vega-Lite donut chart; the rows travel inside the spec."""
    return {
        "data": {"values": distribution},
        "mark": {"type": "arc", "innerRadius": 60},
        "encoding": {
            "theta": {"field": "value", "type": "quantitative"},
            "color": {"field": "name", "type": "nominal", "title": "Outcome"},
        },
    }


def fracture_bar_spec(levels: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "data": {"values": levels},
        "mark": "bar",
        "encoding": {
            # keep T.. -> L.. -> Unknown order from the view
            "x": {"field": "name", "type": "nominal", "sort": None, "title": None},
            "y": {"field": "value", "type": "quantitative", "title": "Patients"},
        },
    }


def patient_table(rows: List[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], List[str]]:
    """
    Table records for st.dataframe, plus the names of the MRI link columns
    ("MRI 1", "MRI 2", ...), one per link of the row with the most links.
    """
    mri_count = max((len(r["mri_links"]) for r in rows), default=0)
    mri_columns = [f"MRI {i + 1}" for i in range(mri_count)]

    table: List[Dict[str, Any]] = []
    for r in rows:
        item: Dict[str, Any] = {
            "ID": r["id"],
            "Age / Gender": r["age_gender"],
            "Fracture Level": r["fracture_level"],
            "Admission Date": r["admission_date"],
            "Hospitalization": r["hospitalization"],
            "Procedure": r["procedure"],
        }
        for i, col in enumerate(mri_columns):
            item[col] = r["mri_links"][i] if i < len(r["mri_links"]) else None
        item["Outcome"] = r["outcome"]
        item["Status"] = r["status"]
        table.append(item)
    return table, mri_columns
