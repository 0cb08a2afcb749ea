"""Subjects, participants, events and event registrations of a university, with CPF and date validation."""

__version__ = "0.1.0"