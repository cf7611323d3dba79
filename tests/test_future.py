from __future__ import annotations

from datetime import datetime, timezone

from kalendar.dates.classifier import classify, weekday_on_or_after
from kalendar.dates.future import align_time_of_day, ensure_future
from kalendar.domain import Candidate, DateKind


def utc(*fields: int) -> datetime:
    return datetime(*fields, tzinfo=timezone.utc)


def test_candidate_truncates_to_milliseconds():
    candidate = Candidate(utc(2026, 1, 1, 0, 0, 0, 123456), DateKind.ISO)
    assert candidate.instant.microsecond == 123000


def test_advance_year_skips_years_without_the_day():
    candidate = Candidate(utc(2024, 2, 29), DateKind.MONTH_DAY)
    candidate.advance_year()
    assert candidate.instant == utc(2028, 2, 29)


def test_weekday_on_or_after_uses_sunday_first_indexes():
    # 2026-10-18 is a Sunday.
    assert weekday_on_or_after(0, utc(2026, 10, 18, 15)) == utc(2026, 10, 18)
    assert weekday_on_or_after(6, utc(2026, 10, 18, 15)) == utc(2026, 10, 24)
    assert weekday_on_or_after(0, utc(2026, 10, 19)) == utc(2026, 10, 25)


def test_classifier_priority_prefers_iso():
    assert classify("2026-03-05T10:00:00Z", utc(2026, 1, 1)).kind is DateKind.ISO
    assert classify("2026-03-05", utc(2026, 1, 1)).kind is DateKind.GENERAL
    assert classify("Thursday, March 5", utc(2026, 1, 1)).kind is DateKind.MONTH_DAY
    assert classify("thursday", utc(2026, 1, 1)).kind is DateKind.WEEKDAY


def test_align_time_only_touches_weekday_candidates():
    weekday = Candidate(utc(2026, 10, 23), DateKind.WEEKDAY)
    general = Candidate(utc(2026, 10, 23), DateKind.GENERAL)
    source = utc(2020, 5, 5, 14, 30, 15, 250000)

    align_time_of_day(weekday, source)
    align_time_of_day(general, source)

    assert weekday.instant == utc(2026, 10, 23, 14, 30, 15, 250000)
    assert general.instant == utc(2026, 10, 23)


def test_ensure_future_is_noop_when_already_future():
    candidate = Candidate(utc(2027, 1, 1), DateKind.GENERAL)
    assert ensure_future(candidate, utc(2026, 1, 1)).instant == utc(2027, 1, 1)


def test_ensure_future_weekday_moves_by_weeks():
    candidate = Candidate(utc(2026, 10, 1), DateKind.WEEKDAY)
    ensure_future(candidate, utc(2026, 10, 20))
    assert candidate.instant == utc(2026, 10, 22)


def test_ensure_future_month_day_moves_by_years():
    candidate = Candidate(utc(2024, 3, 5), DateKind.MONTH_DAY)
    ensure_future(candidate, utc(2026, 6, 1))
    assert candidate.instant == utc(2027, 3, 5)


def test_ensure_future_general_moves_by_rounded_up_days():
    candidate = Candidate(utc(2025, 12, 31, 18, 0), DateKind.GENERAL)
    ensure_future(candidate, utc(2026, 1, 2, 12, 0))
    assert candidate.instant == utc(2026, 1, 2, 18, 0)
