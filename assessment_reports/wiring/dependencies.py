from functools import lru_cache

from assessment_reports.application.ports.record_source import (
    ASSESSMENTS,
    QUESTIONS,
    STUDENT_RESPONSES,
    STUDENTS,
    RecordSourcePort,
)
from assessment_reports.application.use_cases.generate_report import ReportGenerator
from assessment_reports.core.config import Settings, settings
from assessment_reports.infrastructure.store.data_loader import DataLoader
from assessment_reports.infrastructure.store.json_source import JsonRecordSource


def build_record_source(config: Settings) -> RecordSourcePort:
    return JsonRecordSource(
        data_dir=config.DATA_DIR,
        filenames={
            STUDENTS: config.STUDENTS_FILE,
            QUESTIONS: config.QUESTIONS_FILE,
            STUDENT_RESPONSES: config.STUDENT_RESPONSES_FILE,
            ASSESSMENTS: config.ASSESSMENTS_FILE,
        },
    )


def build_report_generator(config: Settings) -> ReportGenerator:
    loader = DataLoader(
        source=build_record_source(config),
        fallback_assessment_name=config.ASSESSMENT_FALLBACK_NAME,
    )
    return ReportGenerator(repository=loader)


@lru_cache
def get_report_generator() -> ReportGenerator:
    """Process-wide generator; its loader reads the datasets once."""
    return build_report_generator(settings)
