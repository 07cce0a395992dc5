# ovfdash/models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


def _s(value: Any) -> str:
    """
    Spreadsheet cells arrive as str, int, float or None.
    Everything becomes a string; None becomes "".
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _age(value: Any) -> Optional[int]:
    """
    Age cell as int, or None for empty / non-numeric / NaN / infinite values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        num = value
    else:
        s = str(value).strip()
        if not s:
            return None
        try:
            num = float(s)
        except ValueError:
            return None
    if not math.isfinite(num):
        return None
    return int(num)


@dataclass(frozen=True)
class PatientRecord:
    id: str
    timestamp: str
    gender: str = ""
    age: Optional[int] = None
    injury_date: str = ""
    fall_history: str = ""
    pre_injury_adl: str = ""
    fracture_level: str = ""
    neuro_symptoms: str = ""
    of_classification: str = ""
    mri_image: str = ""
    medical_history: str = ""
    osteoporosis_history: str = ""
    remarks: str = ""
    current_pain: str = ""
    admission_date: str = ""
    new_fractures: str = ""
    time_to_admission: str = ""
    outcome: str = ""
    procedure: str = ""
    surgery_date: str = ""
    discharge_date: str = ""
    hospitalization_period: str = ""
    discharge_destination: str = ""
    follow_up_status: str = ""
    height: str = ""
    weight: str = ""
    bmi: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PatientRecord":
        """
        Build a record from one feed object (camelCase keys).
        Missing keys are treated as empty.
        """
        kwargs: Dict[str, Any] = {}
        for key, attr in FEED_KEYS.items():
            kwargs[attr] = _s(d.get(key))
        kwargs["age"] = _age(d.get("age"))
        return cls(**kwargs)

    @classmethod
    def from_sheet_row(cls, row: List[Any]) -> "PatientRecord":
        """
        Build a record from a raw sheet row, by column index.
        Column 22 feeds both hospitalizationPeriod and followUpStatus;
        the sheet has no separate status column any more.
        """
        def g(i: int) -> Any:
            return row[i] if i < len(row) else None

        d = {key: g(i) for key, i in SHEET_COLUMNS.items()}
        d["followUpStatus"] = g(SHEET_COLUMNS["hospitalizationPeriod"])
        return cls.from_dict(d)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {key: getattr(self, attr) for key, attr in FEED_KEYS.items()}
        d["age"] = self.age
        return d


# feed key -> attribute name (age is handled separately)
FEED_KEYS: Dict[str, str] = {
    "id": "id",
    "timestamp": "timestamp",
    "gender": "gender",
    "injuryDate": "injury_date",
    "fallHistory": "fall_history",
    "preInjuryADL": "pre_injury_adl",
    "fractureLevel": "fracture_level",
    "neuroSymptoms": "neuro_symptoms",
    "ofClassification": "of_classification",
    "mriImage": "mri_image",
    "medicalHistory": "medical_history",
    "osteoporosisHistory": "osteoporosis_history",
    "remarks": "remarks",
    "currentPain": "current_pain",
    "admissionDate": "admission_date",
    "newFractures": "new_fractures",
    "timeToAdmission": "time_to_admission",
    "outcome": "outcome",
    "procedure": "procedure",
    "surgeryDate": "surgery_date",
    "dischargeDate": "discharge_date",
    "hospitalizationPeriod": "hospitalization_period",
    "dischargeDestination": "discharge_destination",
    "followUpStatus": "follow_up_status",
    "height": "height",
    "weight": "weight",
    "bmi": "bmi",
}

# Column order of the Apps Script export (0-based).
SHEET_COLUMNS: Dict[str, int] = {
    "timestamp": 0,
    "id": 1,
    "gender": 2,
    "age": 3,
    "injuryDate": 4,
    "fallHistory": 5,
    "preInjuryADL": 6,
    "fractureLevel": 7,
    "neuroSymptoms": 8,
    "ofClassification": 9,
    "mriImage": 10,
    "medicalHistory": 11,
    "osteoporosisHistory": 12,
    "remarks": 13,
    "currentPain": 14,
    "admissionDate": 15,
    "newFractures": 16,
    "timeToAdmission": 17,
    "outcome": 18,
    "procedure": 19,
    "surgeryDate": 20,
    "dischargeDestination": 21,
    "hospitalizationPeriod": 22,
}
