import logging

from fastapi import APIRouter, Depends, HTTPException

from assessment_reports.api.v1.schemas import ReportResponseSchema
from assessment_reports.application.exceptions import DataSourceError
from assessment_reports.application.use_cases.generate_report import ReportGenerator
from assessment_reports.domain.entities.report_kind import ReportKind
from assessment_reports.wiring.dependencies import get_report_generator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/reports/{student_id}/{kind}", response_model=ReportResponseSchema)
def get_report(
    student_id: str,
    kind: ReportKind,
    generator: ReportGenerator = Depends(get_report_generator),
):
    try:
        text = generator.generate(kind, student_id)
    except DataSourceError as e:
        logger.exception("Report data could not be loaded", extra={"report_kind": kind.value, "error": str(e)})
        raise HTTPException(status_code=503, detail=str(e))

    return ReportResponseSchema(student_id=student_id, kind=kind, title=kind.label, text=text)
