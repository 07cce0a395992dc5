from ovfdash.dashboard import build_dashboard
from ovfdash.models import PatientRecord
from ovfdash.presentation import fracture_bar_spec, outcome_pie_spec, patient_table
from ovfdash.sample_data import SAMPLE_PATIENTS


def test_chart_specs_carry_their_rows():
    view = build_dashboard(SAMPLE_PATIENTS)

    pie = outcome_pie_spec(view["outcome_distribution"])
    bar = fracture_bar_spec(view["fracture_levels"])

    assert pie["data"]["values"] == view["outcome_distribution"]
    assert bar["data"]["values"] == view["fracture_levels"]
    assert pie["data"]["values"]
    for row in pie["data"]["values"] + bar["data"]["values"]:
        assert set(row) >= {"name", "value"}
    assert bar["encoding"]["x"]["sort"] is None


def test_patient_table_survives_newlines_and_pipes():
    records = [
        PatientRecord(
            id="N1",
            timestamp="2023/10/01 10:00:00",
            outcome="手術\n(BKP) | 予定",
            mri_image="https://a.example/1 https://a.example/2",
        ),
        PatientRecord(id="N2", timestamp="2023/10/02 10:00:00", mri_image="no link"),
    ]
    rows = build_dashboard(records)["rows"]

    table, mri_columns = patient_table(rows)

    assert mri_columns == ["MRI 1", "MRI 2"]
    assert len(table) == 2
    by_id = {t["ID"]: t for t in table}
    assert by_id["N1"]["Outcome"] == "手術\n(BKP) | 予定"
    assert (by_id["N1"]["MRI 1"], by_id["N1"]["MRI 2"]) == ("https://a.example/1", "https://a.example/2")
    assert (by_id["N2"]["MRI 1"], by_id["N2"]["MRI 2"]) == (None, None)
    assert list(by_id["N1"])[-2:] == ["Outcome", "Status"]


def test_patient_table_empty():
    assert patient_table([]) == ([], [])
