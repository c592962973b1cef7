"""Synchronous execution of external tools."""

import logging
import subprocess

log = logging.getLogger(__name__)


class CommandError(Exception):
    """External command failed."""

    pass


def run_command(args: list[str], combined: bool = False) -> str:
    """Run a command and return its output.

    With ``combined`` set, stderr is merged into the returned text, for tools
    whose progress messages go to stderr. Output that is not valid UTF-8
    (subvolume names are arbitrary bytes) is decoded with replacement
    characters. Raises CommandError carrying the tool's diagnostic text on
    any failure.
    """
    log.debug("Running: %s", " ".join(args))
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combined else subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        raise CommandError(f"{args[0]} not found") from e
    except OSError as e:
        raise CommandError(f"Cannot run {args[0]}: {e.strerror or e}") from e

    if result.returncode != 0:
        detail = (result.stdout if combined else result.stderr) or ""
        detail = detail.strip() or f"exit status {result.returncode}"
        log.warning("%s failed: %s", " ".join(args), detail)
        raise CommandError(detail)

    return result.stdout or ""
