import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

# Kinds that go to stderr when echoing
WARNING_KINDS = {"warning", "asset_skipped"}
ERROR_KINDS = {"error", "render_error"}


@dataclass
class BuildEvent:
    kind: str
    message: str
    path: Optional[Path] = None


class BuildLog:
    """
    Collects build events for one or more passes.

    With echo=True every event is also printed the way the old build
    script did it: progress on stdout, warnings and errors on stderr.
    """

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.events: List[BuildEvent] = []

    def emit(self, kind: str, message: str, path: Optional[Path] = None) -> BuildEvent:
        event = BuildEvent(kind=kind, message=message, path=path)
        self.events.append(event)
        if self.echo:
            if kind in ERROR_KINDS:
                print(f"ERROR: {message}", file=sys.stderr)
            elif kind in WARNING_KINDS:
                print(f"WARNING: {message}", file=sys.stderr)
            else:
                print(message)
        return event

    def of_kind(self, kind: str) -> List[BuildEvent]:
        return [e for e in self.events if e.kind == kind]
