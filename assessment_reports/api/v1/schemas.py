from pydantic import BaseModel

from assessment_reports.domain.entities.report_kind import ReportKind


class ReportResponseSchema(BaseModel):
    student_id: str
    kind: ReportKind
    title: str
    text: str
