"""Dialog overlays drawn on top of the main screen."""

from blessed import Terminal

from snapshot_manager.config import DIALOG_HEIGHT, DIALOG_WIDTH
from snapshot_manager.models import Dialog, DialogKind
from snapshot_manager.ui.theme import Theme
from snapshot_manager.utils import fit_width, truncate, wrap_text


class Overlay:
    """Base class for centered boxes."""

    def __init__(self, term: Terminal, theme: Theme) -> None:
        self.term = term
        self.theme = theme

    def _draw_box(self, title: str, x: int, y: int, width: int, height: int) -> list[str]:
        """Draw a box at the given position."""
        chars = self.theme.box_chars()
        lines: list[str] = []

        # Top border
        top = chars["tl"] + chars["h"] * (width - 2) + chars["tr"]
        lines.append(self.term.move_xy(x, y) + top)

        # Title
        title_text = f" {truncate(title, width - 6)} "
        title_pos = (width - len(title_text)) // 2
        title_line = (
            chars["v"]
            + " " * (title_pos - 1)
            + self.theme.bold(title_text)
            + " " * (width - title_pos - len(title_text) - 1)
            + chars["v"]
        )
        lines.append(self.term.move_xy(x, y + 1) + title_line)

        # Separator
        sep = chars["vr"] + chars["h"] * (width - 2) + chars["vl"]
        lines.append(self.term.move_xy(x, y + 2) + sep)

        # Middle empty lines
        for i in range(3, height - 1):
            middle = chars["v"] + " " * (width - 2) + chars["v"]
            lines.append(self.term.move_xy(x, y + i) + middle)

        # Bottom border
        bottom = chars["bl"] + chars["h"] * (width - 2) + chars["br"]
        lines.append(self.term.move_xy(x, y + height - 1) + bottom)

        return lines

    def size(self) -> tuple[int, int]:
        """Fixed overlay size, shrunk only if the terminal is smaller."""
        width = min(DIALOG_WIDTH, max(10, self.term.width))
        height = min(DIALOG_HEIGHT, max(7, self.term.height))
        return width, height

    def center_position(self, width: int, height: int) -> tuple[int, int]:
        """Calculate centered position for dialog."""
        x = max(0, (self.term.width - width) // 2)
        y = max(0, (self.term.height - height) // 2)
        return x, y


class DialogView(Overlay):
    """Renders the open dialog of the controller."""

    def hint(self, dialog: Dialog) -> str:
        if dialog.kind is DialogKind.CONFIRM:
            return "Enter to execute, c or Esc to cancel"
        return "Press Enter to close"

    def render(self, dialog: Dialog) -> list[str]:
        """Render the dialog and return lines. Empty when closed."""
        if not dialog.is_open:
            return []

        width, height = self.size()
        x, y = self.center_position(width, height)
        lines = self._draw_box(dialog.title, x, y, width, height)

        # Message area between separator and hint line
        inner_width = width - 4
        body_rows = height - 5
        body = wrap_text(self.term, dialog.message, inner_width)
        if len(body) > body_rows:
            body = body[: body_rows - 1] + ["..."]

        for i, text in enumerate(body):
            if dialog.kind is DialogKind.INFO and text.startswith("Error"):
                text = self.theme.error(text)
            lines.append(self.term.move_xy(x + 2, y + 3 + i) + fit_width(self.term, text, inner_width))

        hint = self.hint(dialog)
        hint_x = x + max(1, (width - len(hint)) // 2)
        lines.append(self.term.move_xy(hint_x, y + height - 2) + self.theme.dim(hint))
        return lines


class BusyView(Overlay):
    """Shown while a blocking external command runs."""

    def render(self, message: str) -> list[str]:
        width, height = self.size()
        height = min(height, 7)
        x, y = self.center_position(width, height)
        lines = self._draw_box("Working", x, y, width, height)

        inner_width = width - 4
        for i, text in enumerate(wrap_text(self.term, message, inner_width)[: height - 5]):
            lines.append(self.term.move_xy(x + 2, y + 3 + i) + text)

        hint = "Please wait..."
        lines.append(
            self.term.move_xy(x + max(1, (width - len(hint)) // 2), y + height - 2)
            + self.theme.info(hint)
        )
        return lines
