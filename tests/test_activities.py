import io

import pytest

from campusevents.activities import FairEvent, LectureEvent, WorkshopEvent
from campusevents.entities import (
    ExternalParticipant,
    ProfessorParticipant,
    StudentParticipant,
    Subject,
)
from campusevents.prompt import Prompt
from campusevents.registrations import InPersonRegistration, OnlineRegistration


def make_prompt(answers: str) -> Prompt:
    return Prompt(io.StringIO(answers), io.StringIO())


@pytest.fixture
def subject():
    return Subject("Database")


@pytest.fixture
def student(subject):
    return StudentParticipant("Ana Souza", "123.456.789-09", {subject.id: subject})


@pytest.fixture
def professor(subject):
    return ProfessorParticipant("Bruno Lima", "987.654.321-00", {subject.id: subject})


@pytest.fixture
def external():
    return ExternalParticipant("Carla Dias", "111.222.333-96", "Tokyo University")


def test_fair_presenter_takes_vacancy(student):
    fair = FairEvent("Fair", 2, "2024-05-10")
    reg = OnlineRegistration(student, "ana@example.com", "2024-05-01")
    assert fair.add_presenter_registration(reg)
    assert fair.vacancies == 1
    assert fair.presenter_keys() == [student.id]


def test_fair_duplicate_presenter_rejected(student):
    fair = FairEvent("Fair", 5, "2024-05-10")
    reg = InPersonRegistration(student, True, "2024-05-01")
    assert fair.add_presenter_registration(reg)
    assert not fair.add_presenter_registration(reg)
    assert len(fair.presenter_keys()) == 1


def test_fair_full_rejects(student, external):
    fair = FairEvent("Fair", 1, "2024-05-10")
    assert fair.add_attendee_registration(InPersonRegistration(external, False, "2024-05-01"))
    reg = OnlineRegistration(student, "ana@example.com", "2024-05-01")
    assert not fair.add_presenter_registration(reg)
    assert fair.presenter_keys() == []
    assert fair.vacancies == 0


def test_fair_serialize(student):
    fair = FairEvent("Science Fair", 3, "2024-05-10")
    reg = OnlineRegistration(student, "ana@example.com", "2024-05-01")
    fair.add_presenter_registration(reg)
    data = fair.serialize()
    assert data["name"] == "Science Fair"
    assert data["date"] == "2024-05-10"
    assert data["presenters"] == [{"registration": reg.id, "student": student.id}]
    assert data["subjects"] == []
    assert data["attendees"] == []


def test_fair_render_lists_presenters(student):
    fair = FairEvent("Science Fair", 3, "2024-05-10")
    reg = OnlineRegistration(student, "ana@example.com", "2024-05-01")
    fair.add_presenter_registration(reg)
    text = fair.render()
    assert "│Presenters: \n" + reg.render() + "\n" in text
    assert text.startswith("│Event name: Science Fair")


def test_fair_from_input():
    fair = FairEvent.from_input(make_prompt("Spring Fair\n2024/04/02\n15\n"))
    assert fair.name == "Spring Fair"
    assert fair.date.value == "2024/04/02"
    assert fair.vacancies == 15
    assert fair.is_valid()


def test_fair_from_input_end_of_input():
    with pytest.raises(EOFError):
        FairEvent.from_input(make_prompt(""))


def test_fair_ids_increase():
    first = FairEvent("A", 1, "2024-01-01")
    second = FairEvent("B", 1, "2024-01-01")
    assert second.id == first.id + 1


def test_lecture_serialize(subject, professor):
    lecture = LectureEvent("Talk", 10, "2024-07-01", {subject.id: subject}, professor)
    data = lecture.serialize()
    assert data["subjects"] == [{"subject": subject.id}]
    assert data["professor"] == professor.id
    assert data["name"] == "Talk"


def test_lecture_attendees(subject, professor, student):
    lecture = LectureEvent("Talk", 10, "2024-07-01", {subject.id: subject}, professor)
    reg = InPersonRegistration(student, False, "2024-06-01")
    assert lecture.add_attendee_registration(reg)
    assert lecture.attendee_keys() == [student.id]
    assert lecture.serialize()["attendees"] == [
        {"registration": reg.id, "attende": student.id}
    ]


def test_lecture_render(subject, professor):
    lecture = LectureEvent("Talk", 10, "2024-07-01", {subject.id: subject}, professor)
    text = lecture.render()
    assert "│Professor: \n" + professor.render() in text
    assert "│Lecture Subjects: \n│\n" + subject.render() in text
    assert text.endswith("│\n")


def test_lecture_from_input(subject, professor):
    other = Subject("Design")
    answers = f"Talk\n2024-03-01\n12\n{subject.id}\n0\n{professor.id}\n"
    lecture = LectureEvent.from_input(
        make_prompt(answers),
        {subject.id: subject, other.id: other},
        {professor.id: professor},
    )
    assert lecture.name == "Talk"
    assert lecture.vacancies == 12
    assert lecture.subjects == {subject.id: subject}
    assert lecture.professor is professor


def test_workshop_guests(subject, professor, external):
    workshop = WorkshopEvent("Lab", 4, "2024-06-15", {professor.id: professor}, subject)
    reg = InPersonRegistration(external, True, "2024-06-01")
    assert workshop.add_guest_registration(reg)
    assert workshop.guest_keys() == [external.id]
    assert workshop.vacancies == 3


def test_workshop_full_rejects_guest(subject, professor, external, student):
    workshop = WorkshopEvent("Lab", 1, "2024-06-15", {professor.id: professor}, subject)
    assert workshop.add_attendee_registration(
        OnlineRegistration(student, "ana@example.com", "2024-06-01")
    )
    assert not workshop.add_guest_registration(
        InPersonRegistration(external, True, "2024-06-01")
    )
    assert workshop.guest_keys() == []


def test_workshop_serialize(subject, professor, external):
    workshop = WorkshopEvent("Lab", 4, "2024-06-15", {professor.id: professor}, subject)
    reg = OnlineRegistration(external, "carla@example.com", "2024-06-01")
    workshop.add_guest_registration(reg)
    data = workshop.serialize()
    assert data["professors"] == [{"professor": professor.id}]
    assert data["guests"] == [{"registration": reg.id, "external": external.id}]
    assert data["subject"] == subject.id


def test_workshop_render(subject, professor, external):
    workshop = WorkshopEvent("Lab", 4, "2024-06-15", {professor.id: professor}, subject)
    reg = OnlineRegistration(external, "carla@example.com", "2024-06-01")
    workshop.add_guest_registration(reg)
    text = workshop.render()
    assert subject.render() + "│Professors: \n" + professor.render() + "│\n" in text
    assert text.endswith("│Guests: \n" + reg.render() + "│\n")


def test_workshop_from_input(subject, professor):
    second = ProfessorParticipant("Davi Rocha", "444.555.666-19", {})
    answers = (
        f"Lab\n2024-02-10\n8\n{subject.id}\n{second.id}\n{professor.id}\n0\n"
    )
    workshop = WorkshopEvent.from_input(
        make_prompt(answers),
        {subject.id: subject},
        {professor.id: professor, second.id: second},
    )
    assert workshop.subject is subject
    assert set(workshop.professors) == {professor.id, second.id}
    assert workshop.vacancies == 8
    assert workshop.date.value == "2024-02-10"


def test_invalid_date_makes_event_invalid(subject, professor):
    workshop = WorkshopEvent("Lab", 4, "2024-13-01", {professor.id: professor}, subject)
    assert workshop.date.value == ""
    assert not workshop.is_valid()