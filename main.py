# main.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Union

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from cricket_tracker.cache import debug_snapshot, fingerprint, get as cache_get, make_key, set as cache_set
from cricket_tracker.collection import clear_records, delete_record, has_record, save_record
from cricket_tracker.config import DATA_FILE, REPORT_CACHE_TTL_SECONDS, log_level, validate_config
from cricket_tracker.engine import analyze
from cricket_tracker.storage import RecordStore, StorageError
from cricket_tracker.transfer import (
    ImportPayloadError,
    export_csv,
    export_filename,
    export_json,
    parse_import_payload,
)

logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# -----------------------
# App
# -----------------------
app = FastAPI(
    title="Cricket Performance Tracker API",
    version="0.1.0",
    description="Match log storage plus aggregate stats, trends, skill radar and auto-insights",
)


@app.on_event("startup")
def on_startup():
    validate_config()


def get_store() -> RecordStore:
    return RecordStore(DATA_FILE)


@app.get("/health")
def health_check():
    return {
        "status": "ok",
        "time": datetime.utcnow().isoformat() + "Z",
        "cached_reports": len(debug_snapshot()),
    }


# -----------------------
# Helpers
# -----------------------
def _save(store: RecordStore, records: list) -> None:
    try:
        store.save(records)
    except StorageError as e:
        logger.error("%s", e)
        raise HTTPException(status_code=500, detail=str(e))


# -----------------------
# Records
# -----------------------
Number = Union[int, float, str, None]


class RecordIn(BaseModel):
    """
    One match entry as the form sends it. Numbers may arrive as text;
    the normalizer turns anything unparseable into 0.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    date: str = Field(..., description="YYYY-MM-DD")
    time: str = ""
    format: str = Field("T20", description="T20/ODI/Test/T10/Street/Box/Practice or free text")
    match_type: str = Field("Friendly", alias="matchType")
    venue: str = ""

    runs: Number = None
    balls: Number = None
    singles: Number = None
    doubles: Number = None
    triples: Number = None
    fours: Number = None
    sixes: Number = None
    dots: Number = None
    dismissal: str = "Not Out"
    batting_notes: str = Field("", alias="battingNotes")

    overs: Number = Field(None, description="e.g. 3.2 (3 overs 2 balls)")
    bowl_balls: Number = Field(None, alias="bowlBalls")
    runs_conceded: Number = Field(None, alias="runsConceded")
    wickets: Number = None
    maidens: Number = None
    wides: Number = None
    no_balls: Number = Field(None, alias="noBalls")
    bowling_notes: str = Field("", alias="bowlingNotes")

    catches: Number = None
    run_outs: Number = Field(None, alias="runOuts")
    drops: Number = None
    misfields: Number = None
    fielding_notes: str = Field("", alias="fieldingNotes")


@app.get("/api/records")
def list_records(store: RecordStore = Depends(get_store)):
    records = store.load()
    return {"count": len(records), "records": records}


@app.post("/api/records")
def post_record(req: RecordIn, store: RecordStore = Depends(get_store)):
    records = store.load()
    updated, saved = save_record(records, req.model_dump(by_alias=True, exclude_none=True))
    _save(store, updated)
    return {"count": len(updated), "record": saved}


@app.delete("/api/records/{record_id}")
def remove_record(record_id: str, store: RecordStore = Depends(get_store)):
    records = store.load()
    if not has_record(records, record_id):
        raise HTTPException(status_code=404, detail=f"Unknown record: {record_id}")

    updated = delete_record(records, record_id)
    _save(store, updated)
    return {"count": len(updated), "deleted": record_id}


@app.delete("/api/records")
def remove_all_records(store: RecordStore = Depends(get_store)):
    _save(store, clear_records())
    return {"count": 0}


# -----------------------
# Analytics
# -----------------------
@app.get("/api/report")
def get_report(store: RecordStore = Depends(get_store)):
    records = store.load()
    key = make_key("report", fingerprint(records))

    cached = cache_get(key)
    if cached is not None:
        return {"source": "cache", "matches": len(records), "report": cached}

    report: Dict[str, Any] = analyze(records).to_dict()
    cache_set(key, report, ttl_seconds=REPORT_CACHE_TTL_SECONDS)
    return {"source": "engine", "matches": len(records), "report": report}


# -----------------------
# Import / export
# -----------------------
@app.get("/api/export")
def export_records(store: RecordStore = Depends(get_store)):
    return Response(
        content=export_json(store.load()),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


@app.get("/api/export.csv")
def export_records_csv(store: RecordStore = Depends(get_store)):
    filename = export_filename().replace(".json", ".csv")
    return Response(
        content=export_csv(store.load()),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/api/import")
async def import_records(request: Request, store: RecordStore = Depends(get_store)):
    body = await request.body()
    try:
        records = parse_import_payload(body)
    except ImportPayloadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    _save(store, records)
    return {"count": len(records)}
