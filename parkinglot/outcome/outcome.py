"""Results handed back by the dispatcher for every command line.

Recoverable carries the lines to print and the session goes on, Fatal ends
the session with a non-zero exit code, Exit ends it cleanly.
"""
from typing import List

from pydantic import BaseModel


class Outcome(BaseModel):
    lines: List[str] = []

    def ends_session(self):
        return False


class Recoverable(Outcome):
    pass


class Fatal(Outcome):
    error: str
    error_type: str

    def ends_session(self):
        return True


class Exit(Outcome):

    def ends_session(self):
        return True
