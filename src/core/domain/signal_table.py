"""Signal table (Linux man-pages 6.01, signal(7)).

Numbers come from the platform's constants (the `signal` module). Some
names are only synonyms on Linux and borrow another signal's number;
`SIGEMT` and `SIGLOST` are not defined there at all.
"""

from __future__ import annotations

import signal as _signal
import sys

from core.domain.models import Entry

UNKNOWN_SIGNAL = "Unknown signal"

# Synonym -> the name whose number it shares on Linux.
_SYNONYMS: dict[str, str] = {
    "SIGCLD": "SIGCHLD",
    "SIGINFO": "SIGPWR",
    "SIGIOT": "SIGABRT",
    "SIGPOLL": "SIGIO",
    "SIGUNUSED": "SIGSYS",
}

_UNDEFINED = frozenset({"SIGEMT", "SIGLOST"})

# Not exported by interpreters older than 3.11.
_LINUX_FALLBACK: dict[str, int] = {"SIGSTKFLT": 16}

_DESCRIPTIONS: tuple[tuple[str, str], ...] = (
    ("SIGABRT", "Abort signal from abort(3)"),
    ("SIGALRM", "Timer signal from alarm(2)"),
    ("SIGBUS", "Bus error (bad memory access)"),
    ("SIGCHLD", "Child stopped or terminated"),
    ("SIGCLD", "A synonym for SIGCHLD"),
    ("SIGCONT", "Continue if stopped"),
    ("SIGEMT", "Emulator trap"),
    ("SIGFPE", "Floating-point exception"),
    (
        "SIGHUP",
        "Hangup detected on controlling terminal or death of controlling process",
    ),
    ("SIGILL", "Illegal Instruction"),
    ("SIGINFO", "A synonym for SIGPWR"),
    ("SIGINT", "Interrupt from keyboard"),
    ("SIGIO", "I/O now possible (4.2BSD)"),
    ("SIGIOT", "IOT trap. A synonym for SIGABRT"),
    ("SIGKILL", "Kill signal"),
    ("SIGLOST", "File lock lost (unused)"),
    ("SIGPIPE", "Broken pipe: write to pipe with no readers; see pipe(7)"),
    ("SIGPOLL", "Pollable event (Sys V); synonym for SIGIO"),
    ("SIGPROF", "Profiling timer expired"),
    ("SIGPWR", "Power failure (System V)"),
    ("SIGQUIT", "Quit from keyboard"),
    ("SIGSEGV", "Invalid memory reference"),
    ("SIGSTKFLT", "Stack fault on coprocessor (unused)"),
    ("SIGSTOP", "Stop process"),
    ("SIGTSTP", "Stop typed at terminal"),
    ("SIGSYS", "Bad system call (SVr4); see also seccomp(2)"),
    ("SIGTERM", "Termination signal"),
    ("SIGTRAP", "Trace/breakpoint trap"),
    ("SIGTTIN", "Terminal input for background process"),
    ("SIGTTOU", "Terminal output for background process"),
    ("SIGUNUSED", "Synonymous with SIGSYS"),
    ("SIGURG", "Urgent condition on socket (4.2BSD)"),
    ("SIGUSR1", "User-defined signal 1"),
    ("SIGUSR2", "User-defined signal 2"),
    ("SIGVTALRM", "Virtual alarm clock (4.2BSD)"),
    ("SIGXCPU", "CPU time limit exceeded (4.2BSD); see setrlimit(2)"),
    ("SIGXFSZ", "File size limit exceeded (4.2BSD); see setrlimit(2)"),
    ("SIGWINCH", "Window resize signal (4.3BSD, Sun)"),
)


def _number(name: str) -> int | None:
    if name in _UNDEFINED:
        return None
    value = getattr(_signal, _SYNONYMS.get(name, name), None)
    if value is None and sys.platform == "linux":
        value = _LINUX_FALLBACK.get(name)
    return None if value is None else int(value)


SIGNAL_TABLE: tuple[Entry, ...] = tuple(
    Entry(
        name=name,
        number=_number(name),
        description=description,
        primary=name not in _SYNONYMS and name not in _UNDEFINED,
    )
    for name, description in _DESCRIPTIONS
)
