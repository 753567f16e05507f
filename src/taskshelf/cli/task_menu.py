# src/taskshelf/cli/task_menu.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.state import AppState
from ..tasks import task_queries
from ..tasks.task_models import Completion, Priority, Task
from .commands import MenuRegistry
from .prompts import InputCollector

logger = logging.getLogger(__name__)

menu = MenuRegistry("Task Manager (JSON-backed)")


def render_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "-- Tasks (0) --\n(no tasks)"
    return "\n\n".join([f"-- Tasks ({len(tasks)}) --", *(str(t) for t in tasks)])


async def cmd_add(state: AppState, io: InputCollector) -> str:
    io.say("-- Add Task --")
    task = Task(
        title=io.prompt_required("Title: "),
        description=io.prompt_required("Description: "),
        due_date=io.prompt_date_nullable("Due date (YYYY-MM-DD) or leave empty: "),
        priority=io.prompt_choice(Priority, "priority"),
        is_completed=io.prompt_choice(Completion, "status"),
    )
    added = await state.tasks.add(task)
    return f"Task added with ID {added.id}."


async def cmd_update(state: AppState, io: InputCollector) -> str:
    io.say("-- Update Task --")
    task_id = io.prompt_int("Enter task ID to update: ")
    existing = await state.tasks.get_by_id(task_id)
    if existing is None:
        return "Task not found."

    io.say(f"Current:\n{existing}\n")
    io.say("Leave empty to keep current value.")

    title = io.prompt_nullable("New Title: ")
    description = io.prompt_nullable("New Description: ")
    due_date = io.prompt_date_nullable("New Due date (YYYY-MM-DD) or leave empty: ")
    priority = io.prompt_choice_nullable(Priority, "priority", existing.priority)
    completion = io.prompt_choice_nullable(Completion, "status", existing.is_completed)

    if title is not None:
        existing.title = title
    if description is not None:
        existing.description = description
    if due_date is not None:
        existing.due_date = due_date
    if priority is not None:
        existing.priority = priority
    if completion is not None:
        existing.is_completed = completion

    ok = await state.tasks.update(existing)
    return "Task updated." if ok else "Failed to update (task no longer exists)."


async def cmd_delete(state: AppState, io: InputCollector) -> str:
    io.say("-- Delete Task --")
    task_id = io.prompt_int("Enter task ID to delete: ")
    existing = await state.tasks.get_by_id(task_id)
    if existing is None:
        return "Task not found."

    io.say(f"About to delete:\n{existing}\n")
    if not io.confirm("DELETE"):
        return "Cancelled."
    ok = await state.tasks.delete(task_id)
    return "Deleted." if ok else "Failed to delete (task no longer exists)."


async def cmd_view(state: AppState, io: InputCollector) -> str:
    """
    1) all   2) by completion   3) by priority   4) due this week   5) custom due range
    """
    io.say("-- View / Filter Tasks --")
    io.say("1) All tasks\n2) By completion status\n3) By priority\n4) Due this week\n5) Due date range")
    choice = io.prompt("Choice: ")

    tasks = await state.tasks.load()

    if choice == "1":
        result = task_queries.default_order(tasks)
    elif choice == "2":
        result = task_queries.by_completion(tasks, io.prompt_choice(Completion, "status"))
    elif choice == "3":
        result = task_queries.by_priority(tasks, io.prompt_choice(Priority, "priority"))
    elif choice == "4":
        result = task_queries.due_this_week(tasks)
    elif choice == "5":
        start = io.prompt_date_nullable("From (YYYY-MM-DD) or leave empty: ")
        end = io.prompt_date_nullable("To (YYYY-MM-DD) or leave empty: ")
        result = task_queries.due_between(tasks, start, end)
    else:
        return "Invalid choice."

    logger.debug("Task view choice=%s matched=%d of %d", choice, len(result), len(tasks))
    return render_tasks(result)


async def cmd_summary(state: AppState, io: InputCollector) -> str:
    summary = task_queries.summarize(await state.tasks.load())
    lines = ["-- Summary --", f"Total tasks: {summary.total}"]
    for priority, count in summary.by_priority:
        lines.append(f"{count} {priority.label} priority")
    for completion, count in summary.by_completion:
        lines.append(f"{count} {completion.label}")
    return "\n".join(lines)


menu.register("1", cmd_add, "Add Task", aliases=["add"])
menu.register("2", cmd_update, "Update Task", aliases=["update"])
menu.register("3", cmd_delete, "Delete Task", aliases=["delete"])
menu.register("4", cmd_view, "View / Filter Tasks", aliases=["view", "filter"])
menu.register("5", cmd_summary, "Summary", aliases=["summary"])
