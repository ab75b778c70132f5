# tests/test_views.py

from __future__ import annotations

from models import Task
from store import TaskStore, count_remaining
from views import TaskListScreen, render_row, strip_ansi, wrap_words


def _plain(lines: list[str]) -> list[str]:
    return [strip_ansi(line) for line in lines]


def test_render_row_shows_indicator_title_and_description() -> None:
    task = Task(title="Buy milk", description="2%")

    assert _plain(render_row(task, 1, 40)) == ["1. ○ Buy milk", "     2%"]


def test_render_row_completed_indicator() -> None:
    task = Task(title="Buy milk", is_completed=True)

    assert _plain(render_row(task, 3, 40)) == ["3. ✓ Buy milk"]


def test_render_row_wraps_long_description() -> None:
    task = Task(title="Read", description="one two three four five")

    lines = _plain(render_row(task, 1, 15))

    assert lines[0] == "1. ○ Read"
    assert all(len(line) <= 15 for line in lines)
    assert " ".join(l.strip() for l in lines[1:]) == "one two three four five"


def test_render_row_untitled_placeholder() -> None:
    assert _plain(render_row(Task(title=""), 1, 40)) == ["1. ○ <untitled>"]


def test_wrap_words_keeps_overlong_word() -> None:
    assert wrap_words("a supercalifragilistic b", 5) == ["a", "supercalifragilistic", "b"]


def test_screen_rerenders_from_store_changes() -> None:
    store = TaskStore()
    screen = TaskListScreen(store)
    assert "(no tasks yet, press + to add one)" in _plain(screen.render(width=40))

    store.add_task("A", "")
    store.add_task("B", "")
    lines = _plain(screen.render(width=40))

    assert lines[0] == "Tasks (2 remaining)"
    assert lines.index("1. ○ A") < lines.index("2. ○ B")


def test_tap_toggles_the_row_task() -> None:
    store = TaskStore()
    store.add_task("A", "")
    store.add_task("B", "")
    screen = TaskListScreen(store)

    assert screen.tap(2) is True

    a, b = store.tasks
    assert (a.is_completed, b.is_completed) == (False, True)
    assert "2. ✓ B" in _plain(screen.render(width=40))


def test_tap_missing_row_does_nothing() -> None:
    store = TaskStore()
    store.add_task("A", "")
    screen = TaskListScreen(store)
    before = store.tasks

    assert screen.tap(0) is False
    assert screen.tap(2) is False
    assert store.tasks == before


def test_close_unsubscribes() -> None:
    store = TaskStore()
    screen = TaskListScreen(store)
    screen.close()

    store.add_task("A", "")

    assert screen.tasks == ()


def test_only_one_add_form_open_at_a_time() -> None:
    screen = TaskListScreen(TaskStore())

    form = screen.open_add_form(title="draft")
    assert screen.open_add_form() is form

    form.cancel()
    assert screen.open_add_form() is not form


def test_render_row_indent_ignores_colour_codes(reload_theme) -> None:
    reload_theme(FORCE_COLOR="1")
    task = Task(title="Buy milk", description="2%")

    lines = render_row(task, 12, 40)

    assert "\033[" in lines[0]
    assert _plain(lines) == ["12. ○ Buy milk", "      2%"]


def test_screen_str_matches_render() -> None:
    store = TaskStore()
    store.add_task("A", "")
    screen = TaskListScreen(store)

    assert str(screen) == "\n".join(screen.render())


def test_header_remaining_count_matches_store() -> None:
    store = TaskStore()
    for title in ("A", "B", "C"):
        store.add_task(title, "")
    screen = TaskListScreen(store)
    screen.tap(1)

    assert count_remaining(screen.tasks) == store.remaining == 2
    assert _plain(screen.render(width=40))[0] == "Tasks (2 remaining)"


def test_open_form_keeps_draft_title() -> None:
    screen = TaskListScreen(TaskStore())
    form = screen.open_add_form(title="draft")

    assert screen.open_add_form(title="other").title == "draft"

    form.cancel()
    assert screen.open_add_form(title="other").title == "other"
