# tests/test_task_form.py

from __future__ import annotations

import pytest

from task_glitch.tasks.task_form import parse_task_form, split_args
from task_glitch.tasks.task_models import Priority, Status

from .fakes import make_task


def test_parse_full_form() -> None:
    args = split_args('Q4 renewal revenue=1,200 time=4 priority=high status="in progress" notes="call CFO"')
    draft = parse_task_form(args)

    assert draft.title == "Q4 renewal"
    assert draft.revenue == 1200
    assert draft.time_taken == 4
    assert draft.priority == Priority.HIGH
    assert draft.status == Status.IN_PROGRESS
    assert draft.notes == "call CFO"


def test_defaults_for_new_task() -> None:
    draft = parse_task_form(["title=Cold call"])
    assert draft.revenue == 0
    assert draft.time_taken == 0
    assert draft.priority == Priority.MEDIUM
    assert draft.status == Status.TODO
    assert draft.notes == ""


def test_malformed_numbers_become_zero() -> None:
    draft = parse_task_form(["Deal", "revenue=lots", "time=", "hours=nan"])
    assert draft.revenue == 0
    assert draft.time_taken == 0


def test_edit_keeps_unspecified_fields() -> None:
    base = make_task("x", title="Old", revenue=900, time_taken=3, priority=Priority.LOW, notes="n")
    draft = parse_task_form(["status=done"], base=base)

    assert draft.title == "Old"
    assert draft.revenue == 900
    assert draft.time_taken == 3
    assert draft.priority == Priority.LOW
    assert draft.status == Status.DONE
    assert draft.notes == "n"


def test_missing_title_rejected() -> None:
    with pytest.raises(ValueError):
        parse_task_form(["revenue=10"])


def test_unknown_field_or_enum_rejected() -> None:
    with pytest.raises(ValueError):
        parse_task_form(["Deal", "colour=red"])
    with pytest.raises(ValueError):
        parse_task_form(["Deal", "priority=urgent"])
    with pytest.raises(ValueError):
        parse_task_form(["Deal", "status=blocked"])


def test_split_args_tolerates_unbalanced_quotes() -> None:
    assert split_args('add "oops') == ["add", '"oops']


def test_negative_amounts_become_zero() -> None:
    draft = parse_task_form(["Refund", "revenue=-5", "time=-2"])
    assert draft.revenue == 0
    assert draft.time_taken == 0
