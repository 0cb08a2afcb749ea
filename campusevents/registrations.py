"""Registrations of participants to events, in person or online."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from itertools import count
from typing import ClassVar, Generic, TypeVar

from campusevents.dates import Date
from campusevents.entities import Entity, Participant
from campusevents.prompt import Prompt

P = TypeVar("P", bound=Participant)

_ACCESSIBILITY_QUESTION = (
    "Do you have any kind of disability? Enter if you need accessibility support:"
)
_EMAIL_QUESTION = "Enter with a e-mail for contact:"
_PARTICIPANT_TITLE = "Select the registered participant:"


class Registration(Entity, Generic[P]):
    """A participant's registration, dated today unless a date is given.

    Ids run in a separate sequence for each registration class and each
    kind of participant.
    """

    _sequences: ClassVar[dict[type, Iterator[int]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._sequences = {}

    def __init__(self, participant: P, date: str | None = None) -> None:
        # The id depends on the participant's kind, so it is drawn here.
        self._id = self._sequence_for(type(participant))
        self.participant = participant
        self._date = Date.today() if date is None else Date(date)

    @classmethod
    def _sequence_for(cls, kind: type) -> int:
        return next(cls._sequences.setdefault(kind, count(1)))

    @property
    def date(self) -> Date:
        return self._date

    @property
    def participant_id(self) -> int:
        return self.participant.id

    def render(self) -> str:
        return (
            f"│Registration date:{self._date.value}.\n"
            "│\n"
            "│Participant: \n"
            f"{self.participant.render()}"
            "│\n"
        )


class InPersonRegistration(Registration[P]):
    """A registration of someone who attends in person."""

    def __init__(
        self, participant: P, accessibility: bool, date: str | None = None
    ) -> None:
        super().__init__(participant, date)
        self.accessibility = accessibility

    @classmethod
    def from_input(
        cls, prompt: Prompt, available_participants: Mapping[int, P]
    ) -> InPersonRegistration[P]:
        participant = prompt.select_one(_PARTICIPANT_TITLE, available_participants)
        return cls(participant, prompt.flag(_ACCESSIBILITY_QUESTION))

    @classmethod
    def for_participant(cls, prompt: Prompt, participant: P) -> InPersonRegistration[P]:
        return cls(participant, prompt.flag(_ACCESSIBILITY_QUESTION))

    def render(self) -> str:
        answer = "[YES].\n" if self.accessibility else "[NO]\n"
        return f"{super().render()}│Needs accessibility: {answer}"


class OnlineRegistration(Registration[P]):
    """A registration of someone who attends online, with a contact e-mail."""

    def __init__(
        self, participant: P, contact_email: str = "", date: str | None = None
    ) -> None:
        super().__init__(participant, date)
        self.contact_email = contact_email

    @classmethod
    def from_input(
        cls, prompt: Prompt, available_participants: Mapping[int, P]
    ) -> OnlineRegistration[P]:
        participant = prompt.select_one(_PARTICIPANT_TITLE, available_participants)
        return cls(participant, prompt.text(_EMAIL_QUESTION))

    @classmethod
    def for_participant(cls, prompt: Prompt, participant: P) -> OnlineRegistration[P]:
        """Register a known participant; no contact e-mail is asked for."""
        return cls(participant)

    def render(self) -> str:
        return f"{super().render()}│E-mail for contact: {self.contact_email}.\n"