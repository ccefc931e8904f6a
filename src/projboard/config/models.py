"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``projboard.toml`` only holds
overrides. Each form field has its own rules model so that overriding one
bound (``[validation.title] min_length = 3``) keeps the other defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from projboard.domain.validation import ConstraintSet


class TitleRules(ConstraintSet):
    """[validation.title] — required, 5 to 40 characters."""

    required: bool = True
    min_length: int | None = 5
    max_length: int | None = 40


class DescriptionRules(ConstraintSet):
    """[validation.description] — required, at most 140 characters."""

    required: bool = True
    max_length: int | None = 140


class PeopleRules(ConstraintSet):
    """[validation.people] — required, 1 to 10 people."""

    required: bool = True
    min: float | None = 1
    max: float | None = 10


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    title: TitleRules = Field(default_factory=TitleRules)
    description: DescriptionRules = Field(default_factory=DescriptionRules)
    people: PeopleRules = Field(default_factory=PeopleRules)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    width: int = 100
    show_ids: bool = True
