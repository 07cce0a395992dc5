# ovfdash/data_client.py

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

import requests

from .models import PatientRecord
from .sample_data import SAMPLE_PATIENTS

logger = logging.getLogger(__name__)

# Apps Script web app that serves the consult sheet as JSON
GAS_API_URL = os.getenv("GAS_API_URL", "")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("GAS_API_TIMEOUT", "15"))


class DataSourceError(Exception):
    """Custom error for feed / spreadsheet failures."""
    pass


def parse_feed(data: Any) -> List[PatientRecord]:
    """
    Turn a decoded feed payload into records.

    Accepts either a list of objects (camelCase keys) or the raw sheet
    values: a list of rows whose first row is the header.
    """
    if not isinstance(data, list):
        raise DataSourceError(f"Feed payload is not a JSON array (got {type(data).__name__})")

    if data and isinstance(data[0], list):
        items = [(i, row) for i, row in enumerate(data[1:], start=1) if isinstance(row, list)]
        convert = PatientRecord.from_sheet_row
        objects = False
    else:
        items = list(enumerate(data))
        convert = PatientRecord.from_dict
        objects = True

    records: List[PatientRecord] = []
    for i, item in items:
        if objects and not isinstance(item, dict):
            logger.warning("Skipping feed item %d: expected an object, got %s", i, type(item).__name__)
            continue
        try:
            records.append(convert(item))
        except (ValueError, TypeError, OverflowError) as e:
            logger.warning("Skipping feed item %d: %s", i, e)
    return records


def fetch_patients(url: Optional[str] = None) -> List[PatientRecord]:
    """
    GET the feed and parse it. One request, no retries.
    Raises DataSourceError on any failure.
    """
    url = url or GAS_API_URL
    if not url:
        raise DataSourceError("GAS_API_URL is not set")

    try:
        resp = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        raise DataSourceError(f"Error fetching patient data from {url}: {e}") from e

    if not resp.ok:
        raise DataSourceError(f"Feed returned HTTP {resp.status_code}: {resp.reason}")

    try:
        data = resp.json()
    except ValueError as e:
        raise DataSourceError(f"Feed did not return valid JSON: {e}") from e

    return parse_feed(data)


def load_patients(url: Optional[str] = None) -> List[PatientRecord]:
    """
    Records for one render cycle. Never raises: without a configured URL,
    or on any fetch failure, the bundled sample dataset is returned.
    """
    url = url or GAS_API_URL
    if not url:
        logger.warning("GAS_API_URL is not set. Using sample data.")
        return list(SAMPLE_PATIENTS)

    try:
        records = fetch_patients(url)
    except DataSourceError as e:
        logger.warning("Falling back to sample data: %s", e)
        return list(SAMPLE_PATIENTS)

    logger.info("Loaded %d patient records from feed", len(records))
    return records
