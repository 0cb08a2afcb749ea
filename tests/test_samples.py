import json

import pytest

from campusevents.samples import Samples, build_samples


@pytest.fixture
def samples() -> Samples:
    return build_samples()


def names(mapping):
    return [item.name for item in mapping.values()]


def test_subject_names(samples):
    assert names(samples.subjects) == [
        "Literature",
        "Soft Skills",
        "Database",
        "Web Development",
        "Design",
    ]


def test_people(samples):
    assert names(samples.students) == [
        "Thomas Wayne",
        "Jeanne Oliver",
        "August IV",
        "Iv Lynn",
    ]
    assert names(samples.professors) == [
        "Jackson Vesper",
        "Sarah James",
        "Lelouch VI",
        "Àkella Lynn",
    ]
    assert names(samples.externals) == [
        "Caroline Grayson",
        "Diego Martinez",
        "Haruki Nakamura",
    ]


def test_everyone_is_valid(samples):
    people = [
        *samples.students.values(),
        *samples.professors.values(),
        *samples.externals.values(),
    ]
    assert all(person.is_valid() for person in people)


def test_events_are_valid(samples):
    events = [
        *samples.workshops.values(),
        *samples.lectures.values(),
        *samples.fairs.values(),
        *samples.courses.values(),
    ]
    assert len(events) == 12
    assert all(event.is_valid() for event in events)


def test_keys_are_ids(samples):
    for mapping in (
        samples.subjects,
        samples.students,
        samples.professors,
        samples.workshops,
        samples.lectures,
        samples.fairs,
        samples.courses,
        samples.externals,
        samples.student_online_registrations,
        samples.external_in_person_registrations,
    ):
        assert all(key == item.id for key, item in mapping.items())


def test_first_workshop_professors(samples):
    workshop = next(iter(samples.workshops.values()))
    assert workshop.name == "Literature Today"
    assert names(workshop.professors) == ["Jackson Vesper", "Lelouch VI"]
    assert workshop.subject.name == "Literature"
    jeanne = list(samples.students.values())[1]
    assert workshop.attendee_keys() == [jeanne.id]


def test_courses(samples):
    courses = list(samples.courses.values())
    thomas, jeanne = list(samples.students.values())[:2]
    assert courses[0].professor.name == "Jackson Vesper"
    assert courses[0].subject.name == "Database"
    assert courses[2].professor.name == "Lelouch VI"
    assert courses[2].subject.name == "Literature"
    assert courses[0].attendee_keys() == [thomas.id]
    assert courses[0].tutor_keys() == [jeanne.id]
    taken = len(courses[0].attendee_keys()) + len(courses[0].tutor_keys())
    assert courses[0].vacancies == 30 - taken


def test_fair_presenter(samples):
    fairs = list(samples.fairs.values())
    thomas = next(iter(samples.students.values()))
    assert fairs[0].presenter_keys() == [thomas.id]
    assert fairs[0].vacancies == 100 - len(fairs[0].presenter_keys())
    assert fairs[1].presenter_keys() == []
    assert fairs[2].vacancies == 90


def test_lectures(samples):
    lectures = list(samples.lectures.values())
    thomas, jeanne = list(samples.students.values())[:2]
    assert lectures[0].professor.name == "Sarah James"
    assert lectures[0].attendee_keys()[0] == thomas.id
    assert lectures[1].attendee_keys() == [jeanne.id]
    assert names(lectures[2].subjects) == ["Literature", "Soft Skills", "Database"]


def test_registrations(samples):
    online = list(samples.student_online_registrations.values())
    assert [reg.contact_email for reg in online] == [
        "thomas.wayne@example.com",
        "jeanne.oliver@example.com",
        "thomas.wayne@example.com",
    ]
    assert len(samples.external_in_person_registrations) == 4
    in_person = list(samples.professor_in_person_registrations.values())
    assert [reg.accessibility for reg in in_person] == [False, True, True]
    assert in_person[2].date.value == "2025-10-15"


def test_serializes_to_json(samples):
    payload = [event.serialize() for event in samples.courses.values()]
    assert json.loads(json.dumps(payload)) == payload


def test_builds_are_independent():
    first = build_samples()
    second = build_samples()
    assert set(first.subjects).isdisjoint(second.subjects)
    assert names(first.subjects) == names(second.subjects)