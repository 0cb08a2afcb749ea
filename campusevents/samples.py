"""A fixed set of sample data for trying the university manager out."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from campusevents.activities import FairEvent, LectureEvent, WorkshopEvent
from campusevents.entities import (
    ExternalParticipant,
    ProfessorParticipant,
    StudentParticipant,
    Subject,
)
from campusevents.events import CourseEvent
from campusevents.registrations import InPersonRegistration, OnlineRegistration


class _HasId(Protocol):
    @property
    def id(self) -> int: ...


E = TypeVar("E", bound=_HasId)


def _by_id(items: Iterable[E]) -> dict[int, E]:
    return {item.id: item for item in items}


@dataclass
class Samples:
    """Sample entities, events and registrations, each keyed by id."""

    subjects: dict[int, Subject] = field(default_factory=dict)
    students: dict[int, StudentParticipant] = field(default_factory=dict)
    professors: dict[int, ProfessorParticipant] = field(default_factory=dict)
    workshops: dict[int, WorkshopEvent] = field(default_factory=dict)
    lectures: dict[int, LectureEvent] = field(default_factory=dict)
    fairs: dict[int, FairEvent] = field(default_factory=dict)
    courses: dict[int, CourseEvent] = field(default_factory=dict)
    externals: dict[int, ExternalParticipant] = field(default_factory=dict)
    student_online_registrations: dict[int, OnlineRegistration[StudentParticipant]] = (
        field(default_factory=dict)
    )
    professor_online_registrations: dict[
        int, OnlineRegistration[ProfessorParticipant]
    ] = field(default_factory=dict)
    external_online_registrations: dict[
        int, OnlineRegistration[ExternalParticipant]
    ] = field(default_factory=dict)
    student_in_person_registrations: dict[
        int, InPersonRegistration[StudentParticipant]
    ] = field(default_factory=dict)
    professor_in_person_registrations: dict[
        int, InPersonRegistration[ProfessorParticipant]
    ] = field(default_factory=dict)
    external_in_person_registrations: dict[
        int, InPersonRegistration[ExternalParticipant]
    ] = field(default_factory=dict)


def build_samples() -> Samples:
    """Create the sample subjects, people, events and registrations."""
    subjects = [
        Subject(name)
        for name in ("Literature", "Soft Skills", "Database", "Web Development", "Design")
    ]
    literature, soft_skills, database = subjects[0], subjects[1], subjects[2]

    students = [
        StudentParticipant("Thomas Wayne", "123.456.789-09", _by_id([literature, soft_skills])),
        StudentParticipant("Jeanne Oliver", "987.654.321-00", _by_id([soft_skills, database])),
        StudentParticipant("August IV", "111.222.333-96", _by_id([database])),
        StudentParticipant(
            "Iv Lynn", "444.555.666-19", _by_id([literature, soft_skills, database])
        ),
    ]

    professors = [
        ProfessorParticipant("Jackson Vesper", "123.456.789-09", _by_id([soft_skills])),
        ProfessorParticipant("Sarah James", "987.654.321-00", _by_id([soft_skills, database])),
        ProfessorParticipant("Lelouch VI", "111.222.333-96", _by_id([database])),
        ProfessorParticipant("Àkella Lynn", "444.555.666-19", _by_id([literature])),
    ]

    workshops = [
        WorkshopEvent(
            "Literature Today", 25, "2025-06-15",
            _by_id([professors[0], professors[2]]), literature,
        ),
        WorkshopEvent(
            "Emotional Intelligence", 30, "2025-06-18",
            _by_id([professors[0], professors[1]]), soft_skills,
        ),
        WorkshopEvent(
            "DB Design Best Practices", 20, "2025-06-20",
            _by_id([professors[2]]), database,
        ),
    ]

    lectures = [
        LectureEvent(
            "Interdisciplinary Thinking", 50, "2025-07-01",
            _by_id([literature, soft_skills]), professors[1],
        ),
        LectureEvent(
            "Advanced Database Theory", 40, "2025-07-03",
            _by_id([database]), professors[2],
        ),
        LectureEvent(
            "Connecting Humanities & Tech", 60, "2025-07-10",
            _by_id([literature, soft_skills, database]), professors[2],
        ),
    ]

    fairs = [
        FairEvent("Tech & Talent Showcase", 100, "2025-08-01"),
        FairEvent("Humanities Exhibition", 80, "2025-08-05"),
        FairEvent("Design Thinking Fair", 90, "2025-08-10"),
    ]

    courses = [
        CourseEvent("Advanced Database Systems", 30, "2025-09-01", professors[0], database),
        CourseEvent("Communication & Soft Skills", 40, "2025-09-05", professors[0], soft_skills),
        CourseEvent("Contemporary Literature", 25, "2025-09-10", professors[2], literature),
    ]

    # External participants are kept apart from the university's own people.
    externals = [
        ExternalParticipant("Caroline Grayson", "777.888.999-41", "Stanford University"),
        ExternalParticipant("Diego Martinez", "246.813.579-28", "University of Buenos Aires"),
        ExternalParticipant("Haruki Nakamura", "135.792.468-28", "Tokyo University"),
    ]

    student_online = [
        OnlineRegistration(students[0], "thomas.wayne@example.com", "2025-06-01"),
        OnlineRegistration(students[1], "jeanne.oliver@example.com", "2025-06-02"),
        OnlineRegistration(students[0], "thomas.wayne@example.com", "2025-11-11"),
    ]
    professor_online = [
        OnlineRegistration(professors[0], "jackson.vesper@example.com", "2025-06-03"),
        OnlineRegistration(professors[1], "sarah.james@example.com", "2025-06-04"),
        OnlineRegistration(professors[0], "jackson.vesper@example.com", "2025-01-19"),
    ]
    external_online = [
        OnlineRegistration(externals[0], "[email]", "2025-06-05"),
        OnlineRegistration(externals[1], "[email]", "2025-06-06"),
        OnlineRegistration(externals[1], "[email]", "2025-09-13"),
    ]

    student_in_person = [
        InPersonRegistration(students[0], True, "2025-06-07"),
        InPersonRegistration(students[1], False, "2025-06-08"),
        InPersonRegistration(students[0], False, "2025-01-18"),
    ]
    professor_in_person = [
        InPersonRegistration(professors[0], False, "2025-06-09"),
        InPersonRegistration(professors[1], True, "2025-06-10"),
        InPersonRegistration(professors[2], True, "2025-10-15"),
    ]
    external_in_person = [
        InPersonRegistration(externals[1], True, "2025-06-11"),
        InPersonRegistration(externals[0], False, "2025-06-12"),
        InPersonRegistration(externals[1], True, "2025-06-13"),
        InPersonRegistration(externals[0], False, "2025-03-25"),
    ]

    workshops[0].add_guest_registration(external_in_person[1])
    workshops[0].add_guest_registration(external_online[0])
    workshops[0].add_attendee_registration(student_online[1])
    workshops[1].add_attendee_registration(student_in_person[0])

    lectures[0].add_attendee_registration(student_online[0])
    lectures[0].add_attendee_registration(student_in_person[0])
    lectures[1].add_attendee_registration(student_in_person[1])

    fairs[0].add_presenter_registration(student_in_person[0])

    courses[0].add_attendee_registration(student_online[0])
    courses[1].add_attendee_registration(student_in_person[1])
    courses[0].add_tutor_registration(student_online[1])
    courses[1].add_tutor_registration(student_online[1])
    courses[1].add_tutor_registration(student_in_person[0])

    return Samples(
        subjects=_by_id(subjects),
        students=_by_id(students),
        professors=_by_id(professors),
        workshops=_by_id(workshops),
        lectures=_by_id(lectures),
        fairs=_by_id(fairs),
        courses=_by_id(courses),
        externals=_by_id(externals),
        student_online_registrations=_by_id(student_online),
        professor_online_registrations=_by_id(professor_online),
        external_online_registrations=_by_id(external_online),
        student_in_person_registrations=_by_id(student_in_person),
        professor_in_person_registrations=_by_id(professor_in_person),
        external_in_person_registrations=_by_id(external_in_person),
    )