"""Main application class."""

import logging
import signal
import sys
from typing import Any

from blessed import Terminal
from blessed.keyboard import Keystroke

from snapshot_manager.config import INPUT_TIMEOUT, Config
from snapshot_manager.controller import ViewController
from snapshot_manager.services import BtrfsService, SystemService
from snapshot_manager.ui.screens.main import MainScreen
from snapshot_manager.ui.theme import Theme

log = logging.getLogger(__name__)


class App:
    """Main Snapshot Manager application."""

    def __init__(self, config: Config, term: Terminal | None = None) -> None:
        self.config = config
        self.term = term or Terminal()
        self.theme = Theme(self.term)
        self.controller = ViewController(
            config,
            BtrfsService(config),
            SystemService(config),
        )
        self.main_screen = MainScreen(self.term, self.theme, self.controller)
        self.controller.busy = self.main_screen.show_busy
        self.running = False

    def run(self) -> int:
        """Run the application. Returns exit code."""
        # Set up signal handlers
        def handle_signal(signum: int, frame: Any) -> None:
            self.running = False

        signal.signal(signal.SIGINT, handle_signal)
        signal.signal(signal.SIGTERM, handle_signal)

        try:
            if not self.term.is_a_tty:
                raise RuntimeError("a terminal is required")

            log.info(
                "Managing %s (subvolumes: %s/, snapshots: %s/)",
                self.config.root_path,
                self.config.subvolume_prefix,
                self.config.snapshot_prefix,
            )
            self.running = True
            return self._main_loop()

        except KeyboardInterrupt:
            return 0
        except Exception as e:
            log.exception("Interface failed")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        finally:
            self.running = False

    def _main_loop(self) -> int:
        """Main application loop."""
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            # Initial layout pass
            self.controller.refresh()

            needs_redraw = True
            last_width = self.term.width
            last_height = self.term.height

            while self.running:
                # Check for terminal resize
                if self.term.width != last_width or self.term.height != last_height:
                    last_width = self.term.width
                    last_height = self.term.height
                    needs_redraw = True

                if needs_redraw:
                    self.main_screen.render()
                    needs_redraw = False

                key: Keystroke = self.term.inkey(timeout=INPUT_TIMEOUT)

                if key:
                    action = self.controller.handle_key(
                        str(key) if not key.is_sequence else key.name or ""
                    )
                    if action == "quit":
                        self.running = False
                    needs_redraw = True

        return 0
