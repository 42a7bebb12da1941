# tests/test_console.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from task_glitch.cli.bootstrap import create_initial_state, load_initial_tasks
from task_glitch.connectors.console_connector import run_console_loop
from task_glitch.logging_setup import _ConsoleNoiseFilter


def _scripted(lines: list[str]):
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return fake_input


def test_bootstrap_seeds_and_persists(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)
    load_initial_tasks(state)

    assert settings.data_dir.is_dir()
    assert [t.id for t in state.board.tasks] == ["1", "2"]
    slot = settings.data_dir / "test_tasks.json"
    assert not slot.exists()

    state.board.delete_task("2")
    state.board.close()
    assert slot.exists()

    reloaded = create_initial_state(settings=settings)
    load_initial_tasks(reloaded)
    assert [t.id for t in reloaded.board.tasks] == ["1"]


def test_console_loop_runs_commands(settings: SimpleNamespace, capsys: pytest.CaptureFixture[str]) -> None:
    state = create_initial_state(settings=settings)
    load_initial_tasks(state)

    run_console_loop(
        state,
        input_fn=_scripted(
            [
                "",
                '/add "Console deal" revenue=900 time=3',
                "console",
                "/list",
                "/exit",
                "/summary",
            ]
        ),
    )
    state.board.close()

    out = capsys.readouterr().out
    assert "Added:" in out
    assert "1 task(s) match" in out
    assert "Console deal" in out
    # loop stopped at /exit
    assert "Summary:" not in out


def test_console_loop_survives_handler_crash(
    settings: SimpleNamespace, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    state = create_initial_state(settings=settings)
    load_initial_tasks(state)

    def boom() -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(state.board, "summary", boom)
    run_console_loop(state, input_fn=_scripted(["/summary", "/list"]))
    state.board.close()

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert "Enterprise Upsell - Tech Corp" in out


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_noise_filter_levels() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_glitch.core.board", logging.DEBUG))
    assert f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
