"""Schema check for the structured (JSON) scan report."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..errors import ReportSchemaError

REPORT_SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "report.schema.json"


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def report_violations(document: Any, schema_path: Path = REPORT_SCHEMA_PATH) -> list[str]:
    """Return ``pointer: message`` strings for every violation, ordered by location."""
    errors = sorted(
        _validator(schema_path).iter_errors(document),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [f"- {e.json_path}: {e.message}" for e in errors]


def validate_report(document: Any, schema_path: Path = REPORT_SCHEMA_PATH) -> None:
    """Raise ReportSchemaError when ``document`` does not match the report schema."""
    violations = report_violations(document, schema_path)
    if violations:
        raise ReportSchemaError(violations)
