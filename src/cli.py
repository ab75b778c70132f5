"""Interactive loop for the task list.

A row number "taps" that row (toggles completion); ``+`` opens the add
form as a modal on top of the list.
"""
import logging
from typing import Optional
from form import AddTaskForm
from views import TaskListScreen

logger = logging.getLogger(__name__)

# --- terminal control helpers ---
# We aggressively clear: ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home))
# Order (3J first) improves reliability in some terminals.
def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    # Switch to alternate screen buffer
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    # Return to normal screen buffer
    print("\033[?1049l", end="", flush=True)


ADD_COMMANDS = {'+', 'add', 'a'}
EXIT_COMMANDS = {'exit', 'quit', 'q'}


class CLI:
    def __init__(self, screen: TaskListScreen, alt_screen: bool = True):
        self.screen: TaskListScreen = screen
        self.alt_screen: bool = alt_screen
        self._message: Optional[str] = None

    def run(self) -> None:
        """Main loop; the list is cleared and redrawn each cycle.

        Uses the terminal's alternate screen (if enabled) so prior renders
        do not remain in scrollback history.
        """
        exit_message: Optional[str] = None
        logger.info("Session started")
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                self._draw()
                line = input("\n: ").strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    self._help()
                    input("\nPress Enter to return to the list...")
                    continue
                if lower in EXIT_COMMANDS:
                    exit_message = "Goodbye."
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            self.screen.close()
            logger.info("Session ended: %s", self.screen.store)
            if exit_message:
                print(exit_message)

    def _draw(self) -> None:
        _clear_screen()
        print(self.screen)
        if self._message:
            print(f"\n{self._message}")
            self._message = None

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        tokens = line.split()
        cmd = tokens[0].lower()
        if cmd.isdigit() and len(tokens) == 1:
            if not self.screen.tap(int(cmd)):
                self._message = f"No task #{cmd}."
        elif cmd in ADD_COMMANDS:
            title = ' '.join(tokens[1:])
            self._run_form(self.screen.open_add_form(title=title))
        else:
            self._message = "Unknown command. Type 'help' for instructions."

    # -------------------- user-interactive flows --------------------
    def _help(self) -> None:
        print("Commands:")
        print("  <n>                 Toggle completion of task number n")
        print("  +  (or add)         Add a new task (prompts for title and description)")
        print("  add <title...>      Add with the title prefilled (e.g., add buy milk)")
        print("  help                Show this help (press Enter to return)")
        print("  exit                Exit (tasks are not saved)")

    def _run_form(self, form: AddTaskForm) -> None:
        if not form.title:
            form.title = input("Title: ").strip()
        form.description = input("Description: ").strip()
        while form.is_open:
            _clear_screen()
            print('\n'.join(form.render()))
            choice = input("\n: ").strip().lower()
            if choice in ('s', 'save'):
                form.confirm()  # no-op while the title is empty
            elif choice in ('c', 'cancel'):
                form.cancel()
            elif choice in ('t', 'title'):
                form.title = input("Title: ").strip()
            elif choice in ('d', 'description'):
                form.description = input("Description: ").strip()
