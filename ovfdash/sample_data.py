# ovfdash/sample_data.py
from typing import Any, Dict, List

from .models import PatientRecord

# Bundled fallback dataset, in the feed's own (camelCase) shape.
SAMPLE_FEED: List[Dict[str, Any]] = [
    # P001 - L1, surgery the day after admission, still pending
    {
        "timestamp": "2023/10/01 10:00:00",
        "id": "P001",
        "gender": "Female",
        "age": 82,
        "injuryDate": "2023/09/25",
        "fallHistory": "Yes",
        "preInjuryADL": "Independent",
        "fractureLevel": "L1",
        "neuroSymptoms": "None",
        "ofClassification": "Type 3",
        "mriImage": "High intensity at L1",
        "medicalHistory": "Hypertension",
        "osteoporosisHistory": "Alendronate",
        "remarks": "Severe pain on motion",
        "currentPain": "Severe",
        "admissionDate": "2023/10/01",
        "newFractures": "L1",
        "timeToAdmission": "6 days",
        "outcome": "Surgery",
        "surgeryDate": "2023/10/02",
        "dischargeDate": "",
        "hospitalizationPeriod": "",
        "dischargeDestination": "",
        "followUpStatus": "Pending",
    },
    # P002 - T12 with radiculopathy, scheduled for OP
    {
        "timestamp": "2023/10/05 14:30:00",
        "id": "P002",
        "gender": "Male",
        "age": 75,
        "injuryDate": "2023/10/03",
        "fallHistory": "No",
        "preInjuryADL": "Assisted",
        "fractureLevel": "T12",
        "neuroSymptoms": "Radiculopathy",
        "ofClassification": "Type 4",
        "mriImage": "T12 collapse",
        "medicalHistory": "Diabetes",
        "osteoporosisHistory": "None",
        "remarks": "Considering surgery due to neuro deficit",
        "currentPain": "Moderate",
        "admissionDate": "2023/10/05",
        "newFractures": "T12",
        "timeToAdmission": "2 days",
        "outcome": "Surgery",
        "surgeryDate": "2023/10/06",
        "dischargeDate": "",
        "hospitalizationPeriod": "",
        "dischargeDestination": "",
        "followUpStatus": "Scheduled for OP",
    },
    # P003 - L3, conservative, discharged after 14 days
    {
        "timestamp": "2023/10/10 09:15:00",
        "id": "P003",
        "gender": "Female",
        "age": 88,
        "injuryDate": "2023/10/08",
        "fallHistory": "Yes",
        "preInjuryADL": "Wheelchair",
        "fractureLevel": "L3",
        "neuroSymptoms": "None",
        "ofClassification": "Type 2",
        "mriImage": "L3 edema",
        "medicalHistory": "Dementia",
        "osteoporosisHistory": "Denosumab",
        "remarks": "Conservative treatment",
        "currentPain": "Mild",
        "admissionDate": "2023/10/10",
        "newFractures": "L3",
        "timeToAdmission": "2 days",
        "outcome": "Conservative",
        "surgeryDate": "",
        "dischargeDate": "2023/10/24",
        "hospitalizationPeriod": "14 days",
        "dischargeDestination": "Nursing Home",
        "followUpStatus": "Discharged",
    },
    # P004 - T11, under observation, in hospital
    {
        "timestamp": "2023/10/12 11:00:00",
        "id": "P004",
        "gender": "Female",
        "age": 79,
        "injuryDate": "2023/10/10",
        "fallHistory": "Yes",
        "preInjuryADL": "Independent",
        "fractureLevel": "T11",
        "neuroSymptoms": "None",
        "ofClassification": "Type 3",
        "mriImage": "T11 fresh fracture",
        "medicalHistory": "None",
        "osteoporosisHistory": "None",
        "remarks": "Observation",
        "currentPain": "Severe",
        "admissionDate": "2023/10/12",
        "newFractures": "T11",
        "timeToAdmission": "2 days",
        "outcome": "Observation",
        "surgeryDate": "",
        "dischargeDate": "",
        "hospitalizationPeriod": "",
        "dischargeDestination": "",
        "followUpStatus": "In Hospital",
    },
]

SAMPLE_PATIENTS: List[PatientRecord] = [PatientRecord.from_dict(d) for d in SAMPLE_FEED]
