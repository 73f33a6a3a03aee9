"""
Interactive prompt for the cringe-lang front end.

Each line is lexed and parsed on its own and the result is printed in the
current output mode. A malformed line reports its error and the prompt
carries on; the front end itself never recovers from an error.

Commands:
    :ast, :tokens, :json   switch the output mode
    verbose-mode           toggle debug logging
    exit, quit, blank line leave the prompt
"""

import logging

from cringe.cringe_cli import DEFAULT_MODE, MODES, log_level, render
from cringe.cringe_errors import CringeError

LOG = logging.getLogger(__name__)

PROMPT = "> "


def set_verbose(verbose: bool, quiet_level: int = logging.WARNING) -> None:
    """Switches the `cringe` loggers to DEBUG, or back to `quiet_level`."""
    logging.getLogger("cringe").setLevel(logging.DEBUG if verbose else quiet_level)


def handle_command(line: str, state: dict[str, object]) -> bool:
    """Applies a REPL command to `state`; returns False if `line` is not a command."""
    if line.startswith(":") and line[1:] in MODES:
        state["mode"] = line[1:]
        print(f"[mode] >>> Output mode {line[1:]}")
        return True
    if line.lower() == "verbose-mode":
        state["verbose"] = not state["verbose"]
        quiet_level = state.get("quiet_level")
        if not isinstance(quiet_level, int):
            quiet_level = logging.WARNING
        set_verbose(bool(state["verbose"]), quiet_level)
        print(f"[mode] >>> Verbose mode {'ON' if state['verbose'] else 'OFF'}")
        return True
    return False


def start_repl(mode: str = DEFAULT_MODE, verbose: bool = False) -> None:
    print(f"cringe-lang REPL [mode={mode}]. Enter a blank line, 'exit' or 'quit' to leave.")
    # level that "verbose-mode" returns to when switched off
    if verbose:
        quiet_level = log_level()
    else:
        quiet_level = logging.getLogger("cringe").getEffectiveLevel()
    state: dict[str, object] = {"mode": mode, "verbose": verbose, "quiet_level": quiet_level}
    if verbose:
        set_verbose(True)

    while True:
        try:
            line = input(PROMPT).strip()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting cringe-lang REPL.")
            return

        if line in ("", "exit", "quit"):
            print("Exiting cringe-lang REPL.")
            return

        if handle_command(line, state):
            continue

        try:
            print(render(line, str(state["mode"])))
        except (CringeError, ValueError) as e:
            LOG.debug("line rejected: %r", line)
            print(f"[error] >>> {e}")
