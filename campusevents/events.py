"""Events with vacancies, attendees and dates; course events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from campusevents.dates import Date
from campusevents.entities import (
    NamedEntity,
    Participant,
    ProfessorParticipant,
    StudentParticipant,
    Subject,
)
from campusevents.prompt import Prompt
from campusevents.registrations import Registration

P = TypeVar("P", bound=Participant)


def _ask_event_basics(prompt: Prompt) -> tuple[str, str, int]:
    """Ask for name, date and vacancies, in that order."""
    name = prompt.text("Enter the name field: ")
    date = prompt.text(
        "Enter with the date for the event (format: [yyyy/MM/dd] or [yyyy-MM-dd]): "
    )
    vacancies = prompt.integer("Enter with the number of vacancies for the event:")
    return name, date, vacancies


class EventBase(NamedEntity):
    """A named event with a number of free vacancies and a date."""

    def __init__(self, name: str, vacancies: int, date: str) -> None:
        super().__init__(name)
        self.vacancies = vacancies
        self._date = Date(date)

    @property
    def date(self) -> Date:
        return self._date

    def is_valid(self) -> bool:
        return len(self._date.value) > 0 and super().is_valid()

    def render(self) -> str:
        return (
            f"│Event name: {super().render()}\n"
            "│\n"
            f"│Vacancies: {self.vacancies}.\n"
            f"│Date: {self._date.value}.\n"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["date"] = self._date.value
        return data


class Event(EventBase, Generic[P]):
    """An event whose attendees are participants of one kind."""

    def __init__(self, name: str, vacancies: int, date: str) -> None:
        super().__init__(name, vacancies, date)
        self.attendee_registrations: dict[int, Registration[P]] = {}

    def _add_registration(
        self, target: dict[int, Registration[Any]], registration: Registration[Any]
    ) -> bool:
        """Take a vacancy for a registration whose id is not yet in ``target``."""
        if self.vacancies == 0 or registration.id in target:
            return False
        target[registration.id] = registration
        self.vacancies -= 1
        return True

    def add_attendee_registration(self, registration: Registration[P]) -> bool:
        return self._add_registration(self.attendee_registrations, registration)

    def attendee_keys(self) -> list[int]:
        """Ids of the registered attendees."""
        return [reg.participant_id for reg in self.attendee_registrations.values()]

    def render(self) -> str:
        attendees = "".join(
            f"{reg.render()}│\n" for reg in self.attendee_registrations.values()
        )
        return f"{super().render()}│Attendees: \n{attendees}"

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["attendees"] = [
            {"registration": key, "attende": reg.participant_id}
            for key, reg in self.attendee_registrations.items()
        ]
        return data


class CourseEvent(Event[StudentParticipant]):
    """A course taught by a professor on a subject, with student tutors."""

    def __init__(
        self,
        name: str,
        vacancies: int,
        date: str,
        professor: ProfessorParticipant | None,
        subject: Subject,
    ) -> None:
        super().__init__(name, vacancies, date)
        self.professor = professor
        self.subject = subject
        self.tutor_registrations: dict[int, Registration[StudentParticipant]] = {}

    @classmethod
    def from_input(
        cls,
        prompt: Prompt,
        available_subjects: Mapping[int, Subject],
        available_professors: Mapping[int, ProfessorParticipant],
    ) -> CourseEvent:
        name, date, vacancies = _ask_event_basics(prompt)
        subject = prompt.select_one("Select the course subject:", available_subjects)
        professor = prompt.select_one(
            "Select the professor that is going to teach this course:",
            available_professors,
        )
        return cls(name, vacancies, date, professor, subject)

    def add_tutor_registration(
        self, registration: Registration[StudentParticipant]
    ) -> bool:
        return self._add_registration(self.tutor_registrations, registration)

    def tutor_keys(self) -> list[int]:
        """Ids of the registered tutors."""
        return [reg.participant_id for reg in self.tutor_registrations.values()]

    def render(self) -> str:
        professor = (
            self.professor.render() if self.professor is not None else "[NOT ASSIGNED]\n"
        )
        return (
            f"{super().render()}"
            "│Professor: \n"
            f"{professor}"
            "│Course subject: \n"
            f"{self.subject.render()}"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["professor"] = self.professor.id if self.professor is not None else None
        data["subject"] = self.subject.id
        return data