"""Sports and lesson catalog offered by the booking wizard."""

from __future__ import annotations

from dataclasses import dataclass

from trainlikepros.models.booking import LessonCategory, LessonType, Sport


@dataclass(frozen=True, slots=True)
class LessonInfo:
    id: LessonType
    label: str
    description: str
    icon: str

    @property
    def category(self) -> LessonCategory:
        return self.id.category


@dataclass(frozen=True, slots=True)
class SportOption:
    id: Sport
    label: str
    icon: str


LESSONS: tuple[LessonInfo, ...] = (
    LessonInfo(
        id=LessonType.HITTING,
        label="Hitting Fundamentals",
        description="Focus on swing mechanics, bat speed, and plate discipline.",
        icon="fa-baseball-bat-ball",
    ),
    LessonInfo(
        id=LessonType.PITCHING,
        label="Pitching & Velocity",
        description="Develop mechanics, accuracy, and arm health.",
        icon="fa-mound",
    ),
    LessonInfo(
        id=LessonType.FIELDING,
        label="Elite Fielding",
        description="Master footwork, glove work, and throwing accuracy.",
        icon="fa-baseball",
    ),
    LessonInfo(
        id=LessonType.SMALL_GROUP,
        label="Small Group Training",
        description="Competitive 4-player sessions focusing on game scenarios.",
        icon="fa-users",
    ),
)

SPORTS: tuple[SportOption, ...] = (
    SportOption(id=Sport.BASEBALL, label="Baseball", icon="fa-baseball-bat-ball"),
    SportOption(id=Sport.SOFTBALL, label="Softball", icon="fa-softball"),
)

_LESSONS_BY_TYPE = {lesson.id: lesson for lesson in LESSONS}


def lesson_info(lesson_type: LessonType) -> LessonInfo:
    return _LESSONS_BY_TYPE[lesson_type]
