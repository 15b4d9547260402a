"""Arrow-key model menu drawn directly on the terminal."""

import os
import select
import shutil
import sys
import termios
import tty
from collections.abc import Callable

from claudio.constants import BOLD, CYAN, DIM, GREEN, PICKER_PROMPT, RESET

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_LINE = "\033[2K"
CLEAR_BELOW = "\033[J"

# Time to wait for the rest of an escape sequence before treating ESC as a key.
ESCAPE_TIMEOUT_SECONDS = 0.05
MAX_ESCAPE_LENGTH = 8

UP = "up"
DOWN = "down"
HOME = "home"
END = "end"
CONFIRM = "confirm"
CANCEL = "cancel"

KEYMAP = {
    b"\x1b[A": UP,
    b"\x1bOA": UP,
    b"k": UP,
    b"\x1b[B": DOWN,
    b"\x1bOB": DOWN,
    b"j": DOWN,
    b"\x1b[H": HOME,
    b"\x1bOH": HOME,
    b"\x1b[1~": HOME,
    b"\x1b[F": END,
    b"\x1bOF": END,
    b"\x1b[4~": END,
    b"\r": CONFIRM,
    b"\n": CONFIRM,
    b"\x1b": CANCEL,
    b"\x03": CANCEL,
    b"\x04": CANCEL,
    b"q": CANCEL,
    b"": CANCEL,
}


def decode_key(data: bytes) -> str | None:
    """Map raw key bytes to a menu action, or None for keys the menu ignores."""
    return KEYMAP.get(data)


def visible_window(count: int, index: int, height: int) -> tuple[int, int]:
    """Return the [start, end) slice of items to draw so `index` stays visible."""
    height = max(1, min(height, count))
    start = min(max(index - height + 1, 0), count - height)
    return start, start + height


class ModelPicker:
    """Single-choice menu; terminal mode is the caller's job."""

    def __init__(
        self,
        items: list[str],
        read_key: Callable[[], bytes],
        write: Callable[[str], None],
        *,
        prompt: str = PICKER_PROMPT,
        color: bool = False,
        size: os.terminal_size | None = None,
    ) -> None:
        if not items:
            raise ValueError("ModelPicker needs at least one item")
        self._items = items
        self._read_key = read_key
        self._write = write
        self._prompt = prompt
        self._color = color
        size = size or shutil.get_terminal_size(fallback=(80, 24))
        self._width = max(size.columns - 1, 10)
        # One row for the prompt, one spare so the terminal never scrolls.
        self._height = max(size.lines - 2, 1)
        self.index = 0
        self._rows_drawn = 0

    def run(self) -> str | None:
        """Block until the user confirms (returns the item) or cancels (None)."""
        self._write(HIDE_CURSOR)
        try:
            self._draw()
            while True:
                action = decode_key(self._read_key())
                if action == CONFIRM:
                    chosen = self._items[self.index]
                    self._finish(chosen)
                    return chosen
                if action == CANCEL:
                    self._finish(None)
                    return None
                if action is None:
                    continue
                self._move(action)
                self._draw()
        finally:
            self._write(SHOW_CURSOR)

    def _move(self, action: str) -> None:
        count = len(self._items)
        if action == UP:
            self.index = (self.index - 1) % count
        elif action == DOWN:
            self.index = (self.index + 1) % count
        elif action == HOME:
            self.index = 0
        elif action == END:
            self.index = count - 1

    def _style(self, text: str, *codes: str) -> str:
        if not self._color:
            return text
        return "".join(codes) + text + RESET

    def _prompt_line(self) -> str:
        return self._style("?", BOLD, CYAN) + " " + self._style(self._prompt, BOLD) + ":"

    def _item_line(self, position: int) -> str:
        label = self._items[position][: self._width - 2]
        if position == self.index:
            return self._style(f"❯ {label}", BOLD, GREEN)
        return f"  {label}"

    def _draw(self) -> None:
        start, end = visible_window(len(self._items), self.index, self._height)
        lines = [self._prompt_line()]
        lines.extend(self._item_line(position) for position in range(start, end))
        self._rewind()
        self._write("\r\n".join(CLEAR_LINE + line for line in lines))
        self._rows_drawn = len(lines)

    def _rewind(self) -> None:
        """Move the cursor back to the start of the first drawn row."""
        if self._rows_drawn > 1:
            self._write(f"\033[{self._rows_drawn - 1}A")
        self._write("\r")

    def _finish(self, chosen: str | None) -> None:
        self._rewind()
        self._write(CLEAR_BELOW)
        self._rows_drawn = 0
        if chosen is not None:
            summary = f"✔ {self._prompt} · {chosen}"
            self._write(self._style(summary, DIM) + "\r\n")


def _read_terminal_key(fd: int) -> bytes:
    """Read one keypress, including any escape sequence that follows ESC.

    Reads byte by byte so keys queued behind the sequence stay unread.
    """
    data = os.read(fd, 1)
    if data != b"\x1b":
        return data
    ready, _, _ = select.select([fd], [], [], ESCAPE_TIMEOUT_SECONDS)
    if not ready:
        return data

    data += os.read(fd, 1)
    if data[-1:] not in (b"[", b"O"):
        return data
    while len(data) < MAX_ESCAPE_LENGTH:
        chunk = os.read(fd, 1)
        if not chunk:
            break
        data += chunk
        # CSI parameters are digits and ';'; anything else ends the sequence.
        if not (chunk.isdigit() or chunk == b";"):
            break
    return data


def pick_model(models: list[str], *, color: bool = False) -> str | None:
    """Let the user choose a model on the terminal; None means cancelled."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    def write(text: str) -> None:
        os.write(stdout_fd, text.encode())

    picker = ModelPicker(
        models,
        read_key=lambda: _read_terminal_key(stdin_fd),
        write=write,
        color=color,
    )
    try:
        old_attrs = termios.tcgetattr(stdin_fd)
    except termios.error:
        return None
    tty.setraw(stdin_fd)
    try:
        return picker.run()
    except OSError:
        return None
    finally:
        termios.tcsetattr(stdin_fd, termios.TCSAFLUSH, old_attrs)
