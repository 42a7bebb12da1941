# src/task_glitch/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import datetime
from typing import cast

from ..core.board import TaskNotFoundError
from ..core.state import AppState
from ..tasks.sorting import ALL_PRIORITIES
from ..tasks.task_form import parse_task_form, split_args
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = split_args(line[1:])
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskNotFoundError as e:
            return f"No task matches id {e.args[0]!r}."
        except ValueError as e:
            return f"Invalid input: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _fmt_money(value: float) -> str:
    if float(value).is_integer():
        return f"${value:,.0f}"
    return f"${value:,.2f}"


def _fmt_num(value: float) -> str:
    return f"{value:g}"


def _fmt_ts(ts: float) -> str:
    return datetime.fromtimestamp(ts).astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _task_line(task: Task) -> str:
    return (
        f"[{task.id[:8]}] {task.priority.value:<6} | {task.status.value:<11} | {task.title}"
        f" | {_fmt_money(task.revenue)} in {_fmt_num(task.time_taken)}h"
        f" | ROI {task.roi:.2f}x"
    )


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    board = state.board
    tasks = board.visible_tasks()

    header = f"Tasks (search={board.search!r}, priority={board.priority_filter}):"
    if not tasks:
        return header + "\n  No tasks found. Time to generate some revenue!"
    return "\n".join([header, *(f"  {_task_line(t)}" for t in tasks)])


def cmd_view(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /view <id>"
    board = state.board
    task = board.get_task(board.resolve_id(args[0]))
    return (
        f"{task.title}\n"
        f"  id:       {task.id}\n"
        f"  status:   {task.status.value} | {task.priority.value} Priority\n"
        f"  revenue:  {_fmt_money(task.revenue)}\n"
        f"  time:     {_fmt_num(task.time_taken)} Hours\n"
        f"  ROI:      {task.roi:.2f}x\n"
        f"  created:  {_fmt_ts(task.created_at)}\n"
        f"  notes:    {task.notes or 'No detailed notes provided for this task.'}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title words> revenue=<n> time=<hours> [priority=High|Medium|Low]
         [status="To Do"|"In Progress"|Done] [notes="..."]
    """
    if not args:
        return "Usage: /add <title> revenue=<n> time=<hours> [priority=..] [status=..] [notes=..]"
    draft = parse_task_form(args)
    task = state.board.add_task(draft)
    return f"Added: {_task_line(task)}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> field=value ...  (unspecified fields keep their values)"""
    if len(args) < 2:
        return "Usage: /edit <id> field=value ..."
    board = state.board
    task_id = board.resolve_id(args[0])
    draft = parse_task_form(args[1:], base=board.get_task(task_id))
    task = board.update_task(task_id, draft)
    return f"Updated: {_task_line(task)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <id>"
    board = state.board
    task = board.delete_task(board.resolve_id(args[0]))
    timeout = getattr(state.settings, "undo_timeout_seconds", 5.0)
    return f'Task "{task.title}" deleted. Use /undo within {_fmt_num(timeout)}s to restore it.'


def cmd_undo(state: AppState, args: list[str]) -> str:
    task = state.board.undo()
    if task is None:
        return "Nothing to undo."
    return f'Restored "{task.title}".'


def cmd_dismiss(state: AppState, args: list[str]) -> str:
    if not state.board.undo_pending:
        return "No pending undo."
    state.board.dismiss_undo()
    return "Undo dismissed."


def cmd_search(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    state.board.set_search(text)
    if not text:
        return "Search cleared."
    return f"Searching for {text!r}. {len(state.board.visible_tasks())} task(s) match."


def cmd_filter(state: AppState, args: list[str]) -> str:
    value = args[0] if args else ALL_PRIORITIES
    state.board.set_priority_filter(value)
    if state.board.priority_filter == ALL_PRIORITIES:
        return "Showing all priorities."
    return f"Showing {state.board.priority_filter} priority only."


def cmd_summary(state: AppState, args: list[str]) -> str:
    s = state.board.summary()
    return (
        "Summary:\n"
        f"  Total Revenue: {_fmt_money(s.total_revenue)}\n"
        f"  Avg ROI:       {_fmt_num(s.avg_roi)}x\n"
        f"  Efficiency:    {_fmt_money(s.efficiency)}/hr\n"
        f"  Grade:         {s.performance_grade}"
    )


def cmd_exit(state: AppState, args: list[str]) -> str:
    # The console connector stops its loop on /exit before dispatching here.
    return "Bye."


def cmd_reset(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """/reset confirm  -> discard every task and restore the seed list"""
    if not args or args[0].lower() != "confirm":
        return "This discards every task. Use /reset confirm to continue."
    if emit:
        emit("Resetting task list...")
    state.board.reset()
    return f"Task list reset ({len(state.board.tasks)} seed tasks)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks (sorted, filtered).", aliases=["ls"])
registry.register("view", cmd_view, help_text="Show task details: /view <id>.")
registry.register(
    "add",
    cmd_add,
    help_text="Create a task: /add <title> revenue=<n> time=<hours> [priority=..] [status=..] [notes=..].",
    aliases=["new"],
)
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> field=value ...")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("undo", cmd_undo, help_text="Restore the most recently deleted task.")
registry.register("dismiss", cmd_dismiss, help_text="Dismiss the pending undo.")
registry.register("search", cmd_search, help_text="Filter by title: /search <text> (empty clears).")
registry.register(
    "filter", cmd_filter, help_text="Filter by priority: /filter All|High|Medium|Low."
)
registry.register("summary", cmd_summary, help_text="Show revenue, ROI, efficiency and grade.")
registry.register("reset", cmd_reset, help_text="Restore the seed list: /reset confirm.")
registry.register("exit", cmd_exit, help_text="Quit the console.", aliases=["quit"])
