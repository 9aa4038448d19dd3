"""Environment state machine for texpreview.

machine/
├── __init__.py   # Re-exports EnvironmentMachine, Env, ParserState
├── core.py       # EnvironmentMachine, LineRule, ordered RULES
├── modes.py      # Env enum, flush orders, line patterns
└── state.py      # ParserState (environment stack + buffers)

Usage:
    >>> from texpreview.machine import EnvironmentMachine
    >>> machine = EnvironmentMachine()
    >>> html = machine.run([r"\\section{Intro}", "Some text."])

"""

from texpreview.machine.core import RULES, EnvironmentMachine, LineRule
from texpreview.machine.modes import Env
from texpreview.machine.state import ParserState

__all__ = ["RULES", "Env", "EnvironmentMachine", "LineRule", "ParserState"]
