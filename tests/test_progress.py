"""Tests du rapport de progression multicast."""

from __future__ import annotations

import io

import pytest

from multicast.app import ConsoleProgressWriter, FileProgressWriter, hard_work
from multicast.engine import PROGRESS_REPORTER, TRANSFORMER, CallbackList, SignatureMismatch


def test_hard_work_reports_to_every_observer(tmp_path) -> None:
    stream = io.StringIO()
    progress_file = tmp_path / "progress.txt"
    reporter = CallbackList.of(
        PROGRESS_REPORTER,
        ConsoleProgressWriter(stream),
        FileProgressWriter(progress_file),
    )

    hard_work(reporter)

    assert stream.getvalue().split() == [str(p) for p in range(0, 100, 10)]
    assert progress_file.read_text(encoding="utf-8") == "90"


def test_hard_work_with_custom_steps() -> None:
    received: list[int] = []

    hard_work(CallbackList.of(PROGRESS_REPORTER, received.append), steps=4)

    assert received == [0, 25, 50, 75]


def test_hard_work_pauses_between_steps(monkeypatch: pytest.MonkeyPatch) -> None:
    pauses: list[float] = []
    monkeypatch.setattr("multicast.app.progress.time.sleep", pauses.append)

    hard_work(CallbackList.empty(PROGRESS_REPORTER), steps=3, pause=0.5)

    assert pauses == [0.5, 0.5, 0.5]


def test_hard_work_validates_arguments() -> None:
    with pytest.raises(SignatureMismatch):
        hard_work(CallbackList.empty(TRANSFORMER))
    with pytest.raises(ValueError):
        hard_work(CallbackList.empty(PROGRESS_REPORTER), steps=0)


def test_hard_work_accepts_a_plain_callable() -> None:
    received: list[int] = []

    hard_work(received.append, steps=2)

    assert received == [0, 50]


def test_hard_work_rejects_plain_callable_with_wrong_arity() -> None:
    with pytest.raises(SignatureMismatch):
        hard_work(lambda: None)
