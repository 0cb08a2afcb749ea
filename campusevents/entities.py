"""Entities of the university: subjects and participants."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from itertools import count
from typing import Any, ClassVar

from campusevents.cpf import Cpf
from campusevents.prompt import Prompt


class Entity:
    """Something with an id drawn from its own class's sequence."""

    _ids: ClassVar[Iterator[int]] = count(1)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._ids = count(1)

    def __init__(self) -> None:
        self._id = type(self)._next_id()

    @classmethod
    def _next_id(cls) -> int:
        return next(cls._ids)

    @property
    def id(self) -> int:
        return self._id

    def render(self) -> str:
        return f"id: {self._id}.\n"

    def serialize(self) -> dict[str, Any]:
        return {"id": self._id}


class NamedEntity(Entity):
    """An entity with a name."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def is_valid(self) -> bool:
        return len(self._name) > 0

    def render(self) -> str:
        return self._name

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["name"] = self._name
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self._name!r})"


def _ask_name(prompt: Prompt) -> str:
    return prompt.text("Enter the name field: ")


def _subject_ids(subjects: Mapping[int, Subject]) -> list[dict[str, int]]:
    return [{"subject": subject.id} for subject in subjects.values()]


class Subject(NamedEntity):
    """A subject taught and studied at the university."""

    def __init__(self, name: str) -> None:
        super().__init__(name)

    @classmethod
    def from_input(cls, prompt: Prompt) -> Subject:
        return cls(_ask_name(prompt))

    def render(self) -> str:
        return f"│Subject: {self.name}.\n"


class Participant(NamedEntity):
    """A named person identified by a CPF."""

    def __init__(self, name: str, cpf: str) -> None:
        super().__init__(name)
        self._cpf = Cpf(cpf)

    @staticmethod
    def _ask_identity(prompt: Prompt) -> tuple[str, str]:
        name = _ask_name(prompt)
        cpf = prompt.text("Enter the CPF:")
        return name, cpf

    @property
    def cpf(self) -> str:
        return self._cpf.value

    def is_valid(self) -> bool:
        return len(self._cpf.value) > 0 and super().is_valid()

    def render(self) -> str:
        return f"{super().render()}│CPF: {self._cpf.value}.\n"

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["cpf"] = self._cpf.value
        return data


class ExternalParticipant(Participant):
    """A participant coming from another university."""

    def __init__(self, name: str, cpf: str, origin_university: str) -> None:
        super().__init__(name, cpf)
        self.origin_university = origin_university

    @classmethod
    def from_input(cls, prompt: Prompt) -> ExternalParticipant:
        name, cpf = cls._ask_identity(prompt)
        origin = prompt.text(
            "Enter with the university of origin of this external participant: "
        )
        return cls(name, cpf, origin)

    def render(self) -> str:
        return (
            f"│External name: {super().render()}"
            f"│Came from {self.origin_university} university.\n"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["origin university"] = self.origin_university
        return data


class ProfessorParticipant(Participant):
    """A professor and the subjects they teach."""

    def __init__(
        self, name: str, cpf: str, teaching_subjects: Mapping[int, Subject]
    ) -> None:
        super().__init__(name, cpf)
        self.teaching_subjects: dict[int, Subject] = dict(teaching_subjects)

    @classmethod
    def from_input(
        cls, prompt: Prompt, available_subjects: Mapping[int, Subject]
    ) -> ProfessorParticipant:
        name, cpf = cls._ask_identity(prompt)
        subjects = prompt.select_many(
            "Select the subjects the professor teaches:", available_subjects
        )
        return cls(name, cpf, subjects)

    def render(self) -> str:
        subjects = "".join(subject.render() for subject in self.teaching_subjects.values())
        return (
            f"│Professor name: {super().render()}"
            "│Currently teaching the following subjects: \n"
            f"{subjects}"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["subjects"] = _subject_ids(self.teaching_subjects)
        return data

    def teaches(self, subject: Subject) -> bool:
        return subject.id in self.teaching_subjects

    def add_subject(self, subject: Subject) -> bool:
        """Add a subject; False when one with its id is already taught."""
        if subject.id in self.teaching_subjects:
            return False
        self.teaching_subjects[subject.id] = subject
        return True


class StudentParticipant(Participant):
    """A student and the subjects they study."""

    def __init__(
        self, name: str, cpf: str, learning_subjects: Mapping[int, Subject]
    ) -> None:
        super().__init__(name, cpf)
        self.learning_subjects: dict[int, Subject] = dict(learning_subjects)

    @classmethod
    def from_input(
        cls, prompt: Prompt, available_subjects: Mapping[int, Subject]
    ) -> StudentParticipant:
        name, cpf = cls._ask_identity(prompt)
        subjects = prompt.select_many(
            "Select the subjects the student studies:", available_subjects
        )
        return cls(name, cpf, subjects)

    def render(self) -> str:
        subjects = "".join(subject.render() for subject in self.learning_subjects.values())
        return (
            f"│Student name: {super().render()}"
            "│Currently learning the following subjects: \n"
            f"{subjects}"
        )

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["subjects"] = _subject_ids(self.learning_subjects)
        return data