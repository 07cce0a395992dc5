# ovfdash/api.py

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import Cookie, Depends, FastAPI, HTTPException, Query, Response
from pydantic import BaseModel

from .auth import (
    SESSION_COOKIE,
    SESSION_MAX_AGE_SECONDS,
    SESSION_VALUE,
    check_credentials,
    cookie_secure,
    is_authenticated,
)
from .dashboard import build_dashboard
from .data_client import load_patients
from .views import ALL_YEARS

logger = logging.getLogger(__name__)

app = FastAPI(title="Spinal OVF Consult Dashboard API")


# ---------- Pydantic Models ----------

class LoginRequest(BaseModel):
    username: str
    password: str


class AverageOut(BaseModel):
    mean: int
    count: int


class ChartRow(BaseModel):
    name: str
    value: int
    count: Optional[int] = None


class PatientRow(BaseModel):
    id: str
    age_gender: str
    fracture_level: str
    admission_date: str
    hospitalization: str
    hospitalization_days: Optional[int] = None
    procedure: str
    mri_links: List[str]
    outcome: str
    surgical: bool
    status: str


class DashboardResponse(BaseModel):
    total: int
    surgery_candidates: int
    conservative: int
    avg_stay: AverageOut
    avg_postop_days: AverageOut
    avg_time_to_surgery: AverageOut
    stay_by_path: List[ChartRow]
    procedure_postop: List[ChartRow]
    outcome_distribution: List[ChartRow]
    fracture_levels: List[ChartRow]
    years: List[str]
    year: str
    query: str
    rows: List[PatientRow]


class PatientListResponse(BaseModel):
    year: str
    query: str
    total: int
    items: List[PatientRow]


# ---------- Session gate ----------

def require_session(session: Optional[str] = Cookie(default=None)) -> None:
    if not is_authenticated(session):
        raise HTTPException(status_code=401, detail="Login required")


# ---------- Routes ----------

@app.get("/health")
def health_check() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/login")
def login(req: LoginRequest, response: Response) -> Dict[str, str]:
    """
    Set the session cookie when the credentials match.
    """
    if not check_credentials(req.username, req.password):
        logger.warning("Failed login attempt for user %r", req.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    response.set_cookie(
        SESSION_COOKIE,
        SESSION_VALUE,
        max_age=SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        secure=cookie_secure(),
    )
    return {"status": "ok"}


@app.post("/logout")
def logout(response: Response) -> Dict[str, str]:
    response.delete_cookie(SESSION_COOKIE, path="/")
    return {"status": "ok"}


@app.get("/dashboard", response_model=DashboardResponse, dependencies=[Depends(require_session)])
def get_dashboard(
    year: str = Query(ALL_YEARS),
    q: str = Query(""),
) -> DashboardResponse:
    """
    Full dashboard view model for one year selection and search text.
    """
    view = build_dashboard(load_patients(), year=year, query=q)
    return DashboardResponse(**view)


@app.get("/patients", response_model=PatientListResponse, dependencies=[Depends(require_session)])
def list_patients(
    year: str = Query(ALL_YEARS),
    q: str = Query(""),
) -> PatientListResponse:
    """
    Only the table rows (year filter, then text filter).
    """
    view = build_dashboard(load_patients(), year=year, query=q)
    return PatientListResponse(
        year=view["year"],
        query=view["query"],
        total=len(view["rows"]),
        items=view["rows"],
    )
