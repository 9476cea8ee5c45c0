"""Shared validation for 12-hour time labels."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from trainlikepros.core.scheduling import normalize_time_label

TimeLabel = Annotated[str, AfterValidator(normalize_time_label)]
