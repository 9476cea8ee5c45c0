"""Wizard catalog schemas."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from trainlikepros.models.booking import LessonCategory, LessonType, Sport


class SportRead(BaseModel):
    id: Sport
    label: str
    icon: str

    model_config = ConfigDict(from_attributes=True)


class LessonRead(BaseModel):
    id: LessonType
    label: str
    description: str
    icon: str
    category: LessonCategory
    price: Decimal


class CatalogRead(BaseModel):
    sports: list[SportRead]
    lessons: list[LessonRead]
