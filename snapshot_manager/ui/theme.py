"""Theme and styling for the TUI."""

from blessed import Terminal

from snapshot_manager.config import COLORS


class Theme:
    """Theme manager for consistent styling."""

    def __init__(self, term: Terminal) -> None:
        self.term = term

    def colored(self, text: str, color: str) -> str:
        """Apply color to text."""
        color_func = getattr(self.term, color, self.term.white)
        return str(color_func(text))

    def role(self, text: str, role: str) -> str:
        """Apply the color configured for a UI role."""
        return self.colored(text, COLORS.get(role, "white"))

    def frame(self, text: str, focused: bool) -> str:
        """Style pane borders, brighter for the focused pane."""
        return self.role(text, "focused" if focused else "frame")

    def selected(self, text: str) -> str:
        """Style selected item."""
        return str(self.term.black_on_green(text))

    def error(self, text: str) -> str:
        """Style error text."""
        return self.bold(self.role(text, "error"))

    def info(self, text: str) -> str:
        """Style info text."""
        return self.role(text, "info")

    def dim(self, text: str) -> str:
        """Style dimmed text."""
        try:
            return str(self.term.dim(text))
        except (TypeError, AttributeError):
            pass
        # Fallback to darker color if dim not supported
        try:
            return str(self.term.bright_black(text))
        except (TypeError, AttributeError):
            return text

    def bold(self, text: str) -> str:
        """Style bold text."""
        return str(self.term.bold(text))

    def key_hint(self, key: str, action: str) -> str:
        """Format key binding hint."""
        return f"{self.bold(self.role(key, 'hotkey'))}: {action}"

    def box_chars(self) -> dict[str, str]:
        """Get box drawing characters."""
        return {
            "tl": "┌",
            "tr": "┐",
            "bl": "└",
            "br": "┘",
            "h": "─",
            "v": "│",
            "vr": "├",
            "vl": "┤",
        }
