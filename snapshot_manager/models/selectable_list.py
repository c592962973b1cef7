"""Ordered list of names with a clamped cursor."""


class SelectableList:
    """List of item names plus the index of the selected one.

    The selection always points at an existing item, or is 0 when the
    list is empty.
    """

    def __init__(self, items: list[str] | None = None) -> None:
        self._items: list[str] = []
        self._selection = 0
        if items:
            self.replace(items)

    @property
    def items(self) -> list[str]:
        """Copy of the current items."""
        return list(self._items)

    @property
    def selection(self) -> int:
        return self._selection

    @property
    def selected(self) -> str | None:
        """Get the currently selected item."""
        if not self._items:
            return None
        return self._items[self._selection]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def replace(self, items: list[str]) -> None:
        """Swap in new items, keeping the selection if it is still in range."""
        self._items = list(items)
        self._selection = max(0, min(self._selection, len(self._items) - 1))

    def move_up(self) -> bool:
        """Move selection up. Returns True if it moved."""
        if self._selection > 0:
            self._selection -= 1
            return True
        return False

    def move_down(self) -> bool:
        """Move selection down. Returns True if it moved."""
        if self._selection < len(self._items) - 1:
            self._selection += 1
            return True
        return False
