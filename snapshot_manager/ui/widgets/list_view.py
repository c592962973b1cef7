"""List view widget for displaying a selectable list."""

from blessed import Terminal

from snapshot_manager.models import SelectableList
from snapshot_manager.ui.theme import Theme
from snapshot_manager.utils import fit_width


class ListView:
    """Scrollable view over a SelectableList."""

    def __init__(
        self,
        term: Terminal,
        theme: Theme,
        source: SelectableList,
        height: int = 10,
    ) -> None:
        self.term = term
        self.theme = theme
        self.source = source
        self.height = height
        self.scroll_offset = 0

    def _adjust_scroll(self) -> None:
        """Adjust scroll offset to keep selection visible."""
        selected = self.source.selection
        if selected < self.scroll_offset:
            self.scroll_offset = selected
        elif selected >= self.scroll_offset + self.height:
            self.scroll_offset = selected - self.height + 1
        self.scroll_offset = max(0, min(self.scroll_offset, max(0, len(self.source) - self.height)))

    def render(self, x: int, y: int, width: int, highlight: bool = True) -> list[str]:
        """Render the list view and return lines."""
        lines: list[str] = []

        if not self.source:
            self.scroll_offset = 0
            lines.append(self.term.move_xy(x, y) + fit_width(self.term, self.theme.dim("(no items)"), width))
            for i in range(1, self.height):
                lines.append(self.term.move_xy(x, y + i) + " " * width)
            return lines

        self._adjust_scroll()
        items = self.source.items
        visible_items = items[self.scroll_offset : self.scroll_offset + self.height]

        for i, item in enumerate(visible_items):
            actual_index = self.scroll_offset + i
            is_selected = actual_index == self.source.selection
            marker = ">" if is_selected else " "
            text = fit_width(self.term, marker + item, width)

            if is_selected and highlight:
                text = self.theme.selected(text)

            lines.append(self.term.move_xy(x, y + i) + text)

        # Fill remaining height with empty lines
        for i in range(len(visible_items), self.height):
            lines.append(self.term.move_xy(x, y + i) + " " * width)

        return lines
