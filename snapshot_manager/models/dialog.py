"""Modal dialog state and the actions a confirmation can carry."""

from dataclasses import dataclass
from enum import Enum

from snapshot_manager.models.pane import Pane


class DialogKind(Enum):
    """Dialog state."""

    CLOSED = "closed"
    INFO = "info"
    CONFIRM = "confirm"


class ActionKind(Enum):
    """Mutating operations that go through a dialog."""

    CREATE_SNAPSHOT = "create_snapshot"
    DELETE_SNAPSHOT = "delete_snapshot"
    BALANCE = "balance"
    GRUB_UPDATE = "grub_update"


@dataclass(frozen=True)
class PendingAction:
    """Action waiting for the operator to commit a confirmation dialog."""

    kind: ActionKind
    source: str | None = None
    target: str | None = None

    def describe(self) -> str:
        """Short text for logs."""
        args = [arg for arg in (self.source, self.target) if arg]
        if not args:
            return self.kind.value
        return f"{self.kind.value} {' -> '.join(args)}"


class Dialog:
    """At most one modal dialog, either informational or a confirmation.

    Opening is refused while a dialog is already shown. Closing hands back
    the pane that had focus when the dialog was opened.
    """

    def __init__(self) -> None:
        self._kind = DialogKind.CLOSED
        self._title = ""
        self._message = ""
        self._pending: PendingAction | None = None
        self._return_focus: Pane | None = None

    @property
    def kind(self) -> DialogKind:
        return self._kind

    @property
    def is_open(self) -> bool:
        return self._kind is not DialogKind.CLOSED

    @property
    def title(self) -> str:
        return self._title

    @property
    def message(self) -> str:
        return self._message

    @property
    def pending(self) -> PendingAction | None:
        """Action bound to the open confirmation, if any."""
        return self._pending

    def open_info(self, title: str, message: str, return_focus: Pane) -> bool:
        """Show a message with a single acknowledge key."""
        if self.is_open:
            return False
        self._open(DialogKind.INFO, title, message, None, return_focus)
        return True

    def open_confirm(
        self, title: str, message: str, action: PendingAction, return_focus: Pane
    ) -> bool:
        """Ask the operator to commit or cancel ``action``."""
        if self.is_open:
            return False
        self._open(DialogKind.CONFIRM, title, message, action, return_focus)
        return True

    def acknowledge(self) -> Pane | None:
        """Close an informational dialog. Returns the focus to restore."""
        if self._kind is not DialogKind.INFO:
            return None
        return self._close()

    def commit(self) -> tuple[PendingAction, Pane] | None:
        """Close a confirmation and return its action for the caller to run."""
        if self._kind is not DialogKind.CONFIRM:
            return None
        action = self._pending
        assert action is not None
        focus = self._close()
        return action, focus

    def cancel(self) -> Pane | None:
        """Close a confirmation, dropping its action."""
        if self._kind is not DialogKind.CONFIRM:
            return None
        return self._close()

    def _open(
        self,
        kind: DialogKind,
        title: str,
        message: str,
        action: PendingAction | None,
        return_focus: Pane,
    ) -> None:
        self._kind = kind
        self._title = title
        self._message = message
        self._pending = action
        self._return_focus = return_focus

    def _close(self) -> Pane:
        focus = self._return_focus
        assert focus is not None
        self._kind = DialogKind.CLOSED
        self._title = ""
        self._message = ""
        self._pending = None
        self._return_focus = None
        return focus
