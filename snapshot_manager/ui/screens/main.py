"""Main screen: disk info, subvolume and snapshot lists, details and hotkeys."""

from blessed import Terminal

from snapshot_manager.controller import ViewController
from snapshot_manager.models import Pane
from snapshot_manager.ui.theme import Theme
from snapshot_manager.ui.widgets import BusyView, DialogView, ListView
from snapshot_manager.utils import fit_width, truncate, wrap_text

BANNER_HEIGHT = 3
LEGEND_HEIGHT = 2


class MainScreen:
    """Five-pane dashboard drawn from the controller's state."""

    def __init__(self, term: Terminal, theme: Theme, controller: ViewController) -> None:
        self.term = term
        self.theme = theme
        self.controller = controller
        self.list_views: dict[Pane, ListView] = {
            pane: ListView(term, theme, controller.list_for(pane)) for pane in Pane
        }
        self.dialog_view = DialogView(term, theme)
        self.busy_view = BusyView(term, theme)

    def layout(self) -> dict[str, tuple[int, int, int, int]]:
        """Pane rectangles as (x, y, width, height) for the current size."""
        max_x, max_y = self.term.width, self.term.height
        body_y = BANNER_HEIGHT
        body_height = max(3, max_y - BANNER_HEIGHT - LEGEND_HEIGHT)
        volumes_width = max(10, max_x // 5)
        snapshots_x = volumes_width
        info_x = max(snapshots_x + 10, max_x // 2)
        return {
            "disk": (0, 0, max_x, BANNER_HEIGHT),
            "volumes": (0, body_y, volumes_width, body_height),
            "snapshots": (snapshots_x, body_y, info_x - snapshots_x, body_height),
            "info": (info_x, body_y, max(10, max_x - info_x), body_height),
            "legend": (0, max_y - LEGEND_HEIGHT, max_x, LEGEND_HEIGHT),
        }

    def render(self) -> None:
        """Render the entire screen."""
        # Clear screen
        print(self.term.home + self.term.clear, end="")

        panes = self.layout()
        self._draw_disk_info(*panes["disk"])
        self._draw_list(Pane.VOLUMES, *panes["volumes"])
        self._draw_list(Pane.SNAPSHOTS, *panes["snapshots"])
        self._draw_snapshot_info(*panes["info"])
        self._draw_hotkeys(*panes["legend"])

        for line in self.dialog_view.render(self.controller.dialog):
            print(line, end="")

        # Flush output
        print("", end="", flush=True)

    def show_busy(self, message: str) -> None:
        """Draw the working overlay before a blocking command runs."""
        for line in self.busy_view.render(message):
            print(line, end="")
        print("", end="", flush=True)

    def _draw_frame(
        self, title: str, x: int, y: int, width: int, height: int, focused: bool = False
    ) -> None:
        """Draw a titled border around a pane."""
        chars = self.theme.box_chars()
        inner = width - 2
        label = f" {truncate(title, max(0, inner - 2))} " if inner > 2 else ""
        top = chars["tl"] + label + chars["h"] * (inner - len(label)) + chars["tr"]
        print(self.term.move_xy(x, y) + self.theme.frame(top, focused), end="")

        for i in range(1, height - 1):
            print(self.term.move_xy(x, y + i) + self.theme.frame(chars["v"], focused), end="")
            print(
                self.term.move_xy(x + width - 1, y + i) + self.theme.frame(chars["v"], focused),
                end="",
            )

        bottom = chars["bl"] + chars["h"] * inner + chars["br"]
        print(self.term.move_xy(x, y + height - 1) + self.theme.frame(bottom, focused), end="")

    def _draw_disk_info(self, x: int, y: int, width: int, height: int) -> None:
        """Draw the disk usage banner."""
        self._draw_frame("Disk Info", x, y, width, height)
        text = self.controller.disk_info
        if text.startswith("Error"):
            text = self.theme.error(text)
        print(self.term.move_xy(x + 1, y + 1) + fit_width(self.term, text, width - 2), end="")

    def _draw_list(self, pane: Pane, x: int, y: int, width: int, height: int) -> None:
        """Draw the volume or snapshot list pane."""
        focused = self.controller.focus is pane and not self.controller.dialog.is_open
        self._draw_frame(pane.display_name, x, y, width, height, focused)

        if pane is Pane.VOLUMES and self.controller.volumes_error:
            error_lines = wrap_text(self.term, self.controller.volumes_error, width - 2)
            for i, line in enumerate(error_lines[: height - 2]):
                print(
                    self.term.move_xy(x + 1, y + 1 + i)
                    + self.theme.error(fit_width(self.term, line, width - 2)),
                    end="",
                )
            return

        view = self.list_views[pane]
        view.height = height - 2
        for line in view.render(x + 1, y + 1, width - 2, highlight=focused):
            print(line, end="")

    def _draw_snapshot_info(self, x: int, y: int, width: int, height: int) -> None:
        """Draw the wrapped details of the selected snapshot."""
        self._draw_frame("Snapshot Info", x, y, width, height)
        text = self.controller.snapshot_info
        lines = wrap_text(self.term, text, width - 3) if text else []
        for i in range(height - 2):
            line = lines[i] if i < len(lines) else ""
            if line.startswith("Error"):
                line = self.theme.error(line)
            print(
                self.term.move_xy(x + 1, y + 1 + i) + " " + fit_width(self.term, line, width - 3),
                end="",
            )

    def _draw_hotkeys(self, x: int, y: int, width: int, height: int) -> None:
        """Draw the hotkey legend at the bottom."""
        hints = [self.theme.key_hint(key, label) for key, label in self.controller.hotkey_legend()]
        hints_text = " | ".join(hints)
        print(self.term.move_xy(x, y) + self.theme.dim("─" * width), end="")
        print(self.term.move_xy(x, y + height - 1) + fit_width(self.term, hints_text, width - 1), end="")
