"""Tests for natural and relative reminder parsing."""
from datetime import datetime, timedelta

import pytest

from reminders import parse_natural_reminder, parse_relative_reminder, strip_relative_prefix

NOW = datetime(2025, 5, 26, 9, 30, 0)


def test_tomorrow_suffix_keeps_title():
    parsed = parse_natural_reminder("remind me to buy a lock tomorrow", now=NOW)
    assert parsed.phrase == "remind me to"
    assert parsed.title == "buy a lock"
    assert parsed.date == NOW + timedelta(days=1)


def test_tomorrow_is_case_insensitive():
    parsed = parse_natural_reminder("Please Remind me to patch the server TOMORROW", now=NOW)
    assert parsed.title == "patch the server"
    assert parsed.date == NOW + timedelta(days=1)


def test_trailing_relative_expression_drops_title():
    parsed = parse_natural_reminder("remind me to finish in 3 days", now=NOW)
    assert parsed.title is None
    assert parsed.date == NOW + timedelta(days=3)


def test_leading_relative_expression_drops_title():
    parsed = parse_natural_reminder("remind me to in 2 weeks check backups", now=NOW)
    assert parsed.title is None
    assert parsed.date == NOW + timedelta(days=14)


@pytest.mark.parametrize("text, title", [
    ("remind me to finish in 3 months", "finish in 3 months"),
    ("remind me to check in 2 hours", "check in 2 hours"),
    ("remind me to log in 2 accounts", "log in 2 accounts"),
    ("remind me to rotate keys in 0 days", "rotate keys in 0 days"),
])
def test_trailing_expression_without_a_date_keeps_title(text, title):
    """Only a trailing phrase that parses to a date discards the title."""
    parsed = parse_natural_reminder(text, now=NOW)
    assert parsed.title == title
    assert parsed.date is None


def test_non_positive_amount_has_no_date():
    parsed = parse_natural_reminder("remind me to in 0 days", now=NOW)
    assert parsed.date is None


def test_plain_remainder_is_the_title():
    parsed = parse_natural_reminder("remind me to update antivirus", now=NOW)
    assert parsed.title == "update antivirus"
    assert parsed.date is None


def test_add_a_reminder_phrase():
    parsed = parse_natural_reminder("Add a reminder to back up files", now=NOW)
    assert parsed.phrase == "add a reminder to"
    assert parsed.title == "back up files"


def test_missing_phrase():
    parsed = parse_natural_reminder("hello there", now=NOW)
    assert parsed.phrase is None
    assert parsed.title is None and parsed.date is None


@pytest.mark.parametrize("text, days", [
    ("3 days", 3),
    ("1 day", 1),
    ("1 week", 7),
    ("2 Weeks", 14),
])
def test_relative_reminder_units(text, days):
    assert parse_relative_reminder(text, now=NOW) == NOW + timedelta(days=days)


@pytest.mark.parametrize("text", ["3 months", "three days", "days", "", "-1 days"])
def test_relative_reminder_rejects_bad_input(text):
    assert parse_relative_reminder(text, now=NOW) is None


def test_strip_relative_prefix():
    assert strip_relative_prefix("Remind me in 3 days") == "3 days"
