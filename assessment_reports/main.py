from fastapi import FastAPI

from assessment_reports.api.v1.reports import router as reports_router
from assessment_reports.core.config import settings
from assessment_reports.core.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Assessment Reports", version="1.0.0")

app.include_router(reports_router, prefix="/api/v1", tags=["reports"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
