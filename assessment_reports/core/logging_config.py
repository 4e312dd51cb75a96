from __future__ import annotations

import logging

CONTEXT_KEYS = ("dataset", "path", "index", "student_id", "assessment_id", "report_kind", "count", "error")


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a single context-aware stream handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
    return logging.getLogger("assessment_reports")
