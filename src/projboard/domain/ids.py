"""Project ID generation and validation.

IDs are ``prj_`` followed by 12 lowercase hex chars drawn from uuid4.
Uniqueness within a process is enforced by the store, which keeps every
issued ID and regenerates on collision. Once issued, an ID is never reused.
"""

from __future__ import annotations

import re
import uuid

PROJECT_PREFIX = "prj_"
PROJECT_ID_PATTERN = re.compile(r"^prj_[0-9a-f]{12}$")


def generate_project_id() -> str:
    """Return a fresh random project ID (``prj_`` + 12 hex chars)."""
    return f"{PROJECT_PREFIX}{uuid.uuid4().hex[:12]}"


def validate_id(project_id: str) -> bool:
    """Check whether *project_id* matches the project ID pattern."""
    return PROJECT_ID_PATTERN.match(project_id) is not None
