"""Fair, lecture and workshop events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from campusevents.entities import (
    ExternalParticipant,
    ProfessorParticipant,
    StudentParticipant,
    Subject,
)
from campusevents.events import Event, _ask_event_basics
from campusevents.prompt import Prompt
from campusevents.registrations import Registration


class FairEvent(Event[ExternalParticipant]):
    """A fair with external attendees and student presenters."""

    def __init__(self, name: str, vacancies: int, date: str) -> None:
        super().__init__(name, vacancies, date)
        self.presenter_registrations: dict[int, Registration[StudentParticipant]] = {}
        self.subjects: dict[int, Subject] = {}

    @classmethod
    def from_input(cls, prompt: Prompt) -> FairEvent:
        name, date, vacancies = _ask_event_basics(prompt)
        return cls(name, vacancies, date)

    def add_presenter_registration(
        self, registration: Registration[StudentParticipant]
    ) -> bool:
        """Register a presenter; presenters take vacancies like attendees."""
        return self._add_registration(self.presenter_registrations, registration)

    def presenter_keys(self) -> list[int]:
        """Ids of the registered presenters."""
        return [reg.participant_id for reg in self.presenter_registrations.values()]

    def render(self) -> str:
        presenters = "".join(
            f"{reg.render()}\n" for reg in self.presenter_registrations.values()
        )
        return f"{super().render()}│Presenters: \n{presenters}"

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["presenters"] = [
            {"registration": key, "student": reg.participant_id}
            for key, reg in self.presenter_registrations.items()
        ]
        data["subjects"] = [{"subject": subject.id} for subject in self.subjects.values()]
        return data


class LectureEvent(Event[StudentParticipant]):
    """A lecture given by one professor on one or more subjects."""

    def __init__(
        self,
        name: str,
        vacancies: int,
        date: str,
        subjects: Mapping[int, Subject],
        professor: ProfessorParticipant,
    ) -> None:
        super().__init__(name, vacancies, date)
        self.subjects: dict[int, Subject] = dict(subjects)
        self.professor = professor

    @classmethod
    def from_input(
        cls,
        prompt: Prompt,
        available_subjects: Mapping[int, Subject],
        available_professors: Mapping[int, ProfessorParticipant],
    ) -> LectureEvent:
        name, date, vacancies = _ask_event_basics(prompt)
        subjects = prompt.select_many(
            "Select the subject for the lecture event:", available_subjects
        )
        professor = prompt.select_one(
            "Select the professor for the lecture event:", available_professors
        )
        return cls(name, vacancies, date, subjects, professor)

    def render(self) -> str:
        subjects = "".join(subject.render() for subject in self.subjects.values())
        return (
            f"{super().render()}"
            "│\n"
            "│Professor: \n"
            f"{self.professor.render()}"
            "│\n"
            "│Lecture Subjects: \n"
            "│\n"
            f"{subjects}"
            "│\n"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["subjects"] = [{"subject": subject.id} for subject in self.subjects.values()]
        data["professor"] = self.professor.id
        return data


class WorkshopEvent(Event[StudentParticipant]):
    """A workshop on one subject, run by professors, open to external guests."""

    def __init__(
        self,
        name: str,
        vacancies: int,
        date: str,
        professors: Mapping[int, ProfessorParticipant],
        subject: Subject,
    ) -> None:
        super().__init__(name, vacancies, date)
        self.professors: dict[int, ProfessorParticipant] = dict(professors)
        self.subject = subject
        self.guest_registrations: dict[int, Registration[ExternalParticipant]] = {}

    @classmethod
    def from_input(
        cls,
        prompt: Prompt,
        available_subjects: Mapping[int, Subject],
        available_professors: Mapping[int, ProfessorParticipant],
    ) -> WorkshopEvent:
        name, date, vacancies = _ask_event_basics(prompt)
        subject = prompt.select_one(
            "Select the subject for the workshop:", available_subjects
        )
        professors = prompt.select_many(
            "Select the professors for the workshop:", available_professors
        )
        return cls(name, vacancies, date, professors, subject)

    def add_guest_registration(
        self, registration: Registration[ExternalParticipant]
    ) -> bool:
        """Register an external guest; guests take vacancies like attendees."""
        return self._add_registration(self.guest_registrations, registration)

    def guest_keys(self) -> list[int]:
        """Ids of the registered guests."""
        return [reg.participant_id for reg in self.guest_registrations.values()]

    def render(self) -> str:
        professors = "".join(
            f"{professor.render()}│\n" for professor in self.professors.values()
        )
        guests = "".join(f"{reg.render()}│\n" for reg in self.guest_registrations.values())
        return (
            f"{super().render()}"
            f"{self.subject.render()}"
            "│Professors: \n"
            f"{professors}"
            "│Guests: \n"
            f"{guests}"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["professors"] = [
            {"professor": professor.id} for professor in self.professors.values()
        ]
        data["guests"] = [
            {"registration": key, "external": reg.participant_id}
            for key, reg in self.guest_registrations.items()
        ]
        data["subject"] = self.subject.id
        return data