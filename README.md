# campusevents

A library for modelling a university's subjects, professors, students and
events: workshops, lectures, fairs and courses. Participants can be
registered to events either in person (with an accessibility flag) or
online (with a contact e-mail). Participants are identified by a CPF, and
both CPFs and event dates are validated.

## Installing

```
pip install .
```

## Modules

- `campusevents.cpf`: `validate_cpf`, `calculate_verifier_digit` and the
  `Cpf` value, which holds an empty string when given an invalid number.
- `campusevents.dates`: `validate_date`, `is_leap_year`, the `slice_*`
  helpers and the `Date` value with `day`, `month` and `year`. Dates are
  written as `yyyy/MM/dd` or `yyyy-MM-dd`, with years from 1900 up to the
  current year.
- `campusevents.entities`: `Subject`, `StudentParticipant`,
  `ProfessorParticipant` and `ExternalParticipant`. Each kind has its own id
  sequence starting at 1.
- `campusevents.registrations`: `InPersonRegistration` and
  `OnlineRegistration`.
- `campusevents.events`: `EventBase`, `Event` and `CourseEvent`.
- `campusevents.activities`: `FairEvent`, `LectureEvent` and
  `WorkshopEvent`.
- `campusevents.samples`: `build_samples()` returns a `Samples` object
  holding a fixed set of subjects, people, events and registrations.
- `campusevents.prompt`: `Prompt`, which reads answers from a text stream
  and writes menus to another; every `from_input` class method uses it to
  ask for a new record.

Every entity has `render()`, which returns its text listing, and
`serialize()`, which returns a dict ready for `json.dumps`.

## Example

```python
from campusevents.entities import Subject, StudentParticipant
from campusevents.events import CourseEvent
from campusevents.entities import ProfessorParticipant
from campusevents.registrations import OnlineRegistration

database = Subject("Database")
professor = ProfessorParticipant("Ada Teacher", "123.456.789-09", {database.id: database})
student = StudentParticipant("Sam Learner", "987.654.321-00", {database.id: database})

course = CourseEvent("Database Systems", 30, "2024-09-01", professor, database)
registration = OnlineRegistration(student, "sam@example.com", "2024-08-20")
course.add_attendee_registration(registration)   # True, takes one vacancy

print(course.render())
print(course.serialize())
```

Events take a vacancy for each attendee, tutor, presenter or guest added,
and refuse new registrations once none are left.

Sample data:

```python
from campusevents.samples import build_samples

samples = build_samples()
july = [lecture for lecture in samples.lectures.values() if lecture.date.month == 7]
```

Values can also be checked on their own:

```python
from campusevents.cpf import validate_cpf
from campusevents.dates import validate_date, is_leap_year

validate_cpf("123.456.789-09", False)   # True
validate_date("2024/02/29", False)      # True
is_leap_year(1900)                      # False
```

## What it does not do

The package has no command to run and no interactive menu program, and no
object that gathers all of a university's records in one place. It does
not produce reports across all records, does not find events by month for
you, and does not write anything to disk; `serialize()` gives data that the
caller can store however it likes.

## Tests

```
pip install .[test]
pytest
```