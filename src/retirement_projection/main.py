import logging
from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_CREDENTIALS,
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    CSV_FILENAME,
    DEFAULT_CHART_FIELDS,
    LOG_FORMAT,
    LOG_LEVEL,
)
from .export import rows_to_csv
from .models import ChartSeries, DataRow, Inputs, ProjectionResult
from .projection import build_result, chart_series, project, sort_rows
from .settings_store import SettingsStore

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def get_settings_store() -> SettingsStore:
    return SettingsStore()


# ============================
# FastAPI app
# ============================
app = FastAPI(title=API_TITLE, description=API_DESCRIPTION, version=API_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_CREDENTIALS,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


@app.get("/")
def root():
    return {"message": API_TITLE, "docs": "Visit /docs for API documentation"}


@app.get("/api/default_inputs")
def default_inputs() -> Inputs:
    return Inputs()


@app.post("/api/project")
def run_projection(inputs: Inputs, start_year: Optional[int] = None) -> ProjectionResult:
    rows = project(inputs, start_year)
    logger.info("Projected %d rows for ages %d-%d", len(rows), inputs.initial_age, inputs.max_age)
    return build_result(rows)


@app.post("/api/project/table")
def projection_table(
    inputs: Inputs,
    sort_key: Optional[str] = None,
    direction: Literal["ascending", "descending"] = "ascending",
    start_year: Optional[int] = None,
) -> List[DataRow]:
    rows = project(inputs, start_year)
    if sort_key is None:
        return rows
    try:
        return sort_rows(rows, sort_key, direction)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/project/chart")
def projection_chart(
    inputs: Inputs,
    fields: List[str] = Query(default=DEFAULT_CHART_FIELDS),
    x: Literal["age", "year"] = "age",
    start_year: Optional[int] = None,
) -> ChartSeries:
    rows = project(inputs, start_year)
    try:
        return chart_series(rows, fields, x)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/project/csv")
def projection_csv(inputs: Inputs, start_year: Optional[int] = None):
    rows = project(inputs, start_year)
    return Response(
        content=rows_to_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


# ============================
# Persisted settings
# ============================
@app.get("/api/settings")
def load_settings(store: SettingsStore = Depends(get_settings_store)) -> Inputs:
    return store.load()


@app.put("/api/settings")
def save_settings(inputs: Inputs, store: SettingsStore = Depends(get_settings_store)) -> Inputs:
    return store.save(inputs)


@app.delete("/api/settings")
def clear_settings(store: SettingsStore = Depends(get_settings_store)):
    removed = store.clear()
    return {"removed": removed}
