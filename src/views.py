"""List screen and row rendering.

The screen never mutates tasks: it keeps the latest snapshot pushed by the
store and routes row taps back to ``TaskStore.toggle_completion``.
"""
import re, shutil
from typing import List, Optional

from form import AddTaskForm
from models import Task
from store import Snapshot, TaskStore, count_remaining
from theme import color, BOLD, HEADER_COLOR, INDICATOR_COLOR, MUTED_COLOR, NUMBER_COLOR

TITLE = "Tasks"
INDICATOR = {True: "✓", False: "○"}
MIN_WIDTH = 24
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str) -> str:
    return ANSI_RE.sub('', s)


def visible_len(s: str) -> int:
    return len(strip_ansi(s))


def terminal_width() -> int:
    return max(MIN_WIDTH, shutil.get_terminal_size((80, 24)).columns)


def wrap_words(text: str, limit: int) -> List[str]:
    """Greedy word wrap; a single word longer than ``limit`` gets its own line."""
    limit = max(1, limit)
    lines: List[str] = []
    current = ''
    for w in text.split():
        candidate = w if not current else current + ' ' + w
        if len(candidate) <= limit:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = w
    if current:
        lines.append(current)
    return lines


def render_row(task: Task, number: int, width: int) -> List[str]:
    """Render one task: number, completion indicator, title, then the description."""
    prefix = (color(f"{number}.", NUMBER_COLOR) + ' '
              + color(INDICATOR[task.is_completed], INDICATOR_COLOR[task.is_completed]) + ' ')
    prefix_len = visible_len(prefix)
    indent = ' ' * prefix_len
    limit = width - prefix_len
    title_lines = wrap_words(task.title, limit) or ['<untitled>']
    lines = [prefix + color(title_lines[0], BOLD)]
    lines.extend(indent + color(t, BOLD) for t in title_lines[1:])
    lines.extend(indent + color(d, MUTED_COLOR) for d in wrap_words(task.description, limit))
    return lines


class TaskListScreen:
    def __init__(self, store: TaskStore):
        self.store: TaskStore = store
        self.tasks: Snapshot = store.tasks
        self.form: Optional[AddTaskForm] = None
        self._handle: Optional[int] = store.subscribe(self._on_change)

    def _on_change(self, tasks: Snapshot) -> None:
        self.tasks = tasks

    def close(self) -> None:
        if self._handle is not None:
            self.store.unsubscribe(self._handle)
            self._handle = None

    # -------------------- interaction --------------------
    def tap(self, number: int) -> bool:
        """Toggle the task shown on row ``number`` (1-based). False if no such row."""
        if number < 1 or number > len(self.tasks):
            return False
        self.store.toggle_completion(self.tasks[number - 1].id)
        return True

    def open_add_form(self, title: str = '') -> AddTaskForm:
        """Open the add form, or return the one already open.

        ``title`` only prefills a newly opened form; an open form keeps its draft.
        """
        if self.form is None or not self.form.is_open:
            self.form = AddTaskForm(self.store, title=title)
        return self.form

    # -------------------- display --------------------
    def render(self, width: Optional[int] = None) -> List[str]:
        width = width or terminal_width()
        header = color(TITLE, HEADER_COLOR, BOLD)
        if self.tasks:
            header += ' ' + color(f"({count_remaining(self.tasks)} remaining)", MUTED_COLOR)
        lines = [header, color('-' * width, HEADER_COLOR)]
        if not self.tasks:
            lines.append(color("(no tasks yet, press + to add one)", MUTED_COLOR))
        for number, task in enumerate(self.tasks, start=1):
            lines.extend(render_row(task, number, width))
        lines.append('')
        lines.append(color("[#] toggle  [+] add  [help]  [exit]", MUTED_COLOR))
        return lines

    def __str__(self) -> str:
        return '\n'.join(self.render())
