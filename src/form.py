"""Add-task modal form.

Holds the uncommitted title/description for as long as the form is open.
Either way out (save or cancel) discards them.
"""
from typing import List

from store import TaskStore
from theme import color, BOLD, HEADER_COLOR, MUTED_COLOR


class AddTaskForm:
    def __init__(self, store: TaskStore, title: str = '', description: str = ''):
        self._store = store
        self.title: str = title
        self.description: str = description
        self.is_open: bool = True

    @property
    def can_confirm(self) -> bool:
        """Save stays disabled until a title is entered."""
        return self.is_open and bool(self.title)

    def confirm(self) -> bool:
        if not self.can_confirm:
            return False
        self._store.add_task(self.title, self.description)
        self._close()
        return True

    def cancel(self) -> None:
        self._close()

    def _close(self) -> None:
        self.title = ''
        self.description = ''
        self.is_open = False

    def render(self) -> List[str]:
        def field(label: str, value: str) -> str:
            shown = value if value else color(label, MUTED_COLOR)
            return f"  {label[0].lower()}) {shown}"

        save = color("[s] Save", BOLD) if self.can_confirm else color("[s] Save", MUTED_COLOR)
        return [
            color("Add Task", HEADER_COLOR, BOLD),
            '',
            color("Task Details", MUTED_COLOR),
            field("Title", self.title),
            field("Description", self.description),
            '',
            "[c] Cancel    " + save,
        ]
