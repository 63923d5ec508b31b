"""Tests resolution of signal queries"""

import signal
import sys

import pytest

from adapters.descriptions import LibcSignalDescriptions
from core.domain.signal_table import SIGNAL_TABLE, UNKNOWN_SIGNAL
from core.services.lookup import SIGNALS, list_signals, resolve_signal

linux_only = pytest.mark.skipif(sys.platform != "linux", reason="Linux signal numbers")

# -----------------------------------------------------------------------------


def test_table():
    assert len(SIGNAL_TABLE) == 38
    assert len(SIGNALS) == len(SIGNAL_TABLE)
    assert {e.name for e in SIGNAL_TABLE if not e.primary} == {
        "SIGCLD",
        "SIGEMT",
        "SIGINFO",
        "SIGIOT",
        "SIGLOST",
        "SIGPOLL",
        "SIGUNUSED",
    }


def test_example_status():
    res = resolve_signal("130", status=True)
    assert res.name == "SIGINT"
    assert res.number == signal.SIGINT
    assert res.description == "Interrupt from keyboard"


def test_numbers_and_names():
    assert resolve_signal("2").name == "SIGINT"
    assert resolve_signal("SIGINT").number == signal.SIGINT
    assert resolve_signal("sigint").name == "SIGINT"
    assert resolve_signal("INT").name == "SIGINT"
    assert resolve_signal("kill").number == signal.SIGKILL

    # Names are not affected by the status flag
    assert resolve_signal("SIGTERM", status=True).number == signal.SIGTERM


def test_round_trip():
    for entry in SIGNAL_TABLE:
        assert SIGNALS.by_name(entry.name) == entry
        if entry.number is None:
            continue

        by_number = resolve_signal(str(entry.number))
        assert by_number.known
        assert by_number.number == entry.number
        assert resolve_signal(by_number.name).entry == by_number.entry

        by_status = resolve_signal(str(entry.number + 128), status=True)
        assert by_status.entry == by_number.entry


@linux_only
def test_synonyms():
    assert resolve_signal("SIGCLD").number == signal.SIGCHLD
    assert resolve_signal(str(signal.SIGCHLD)).name == "SIGCHLD"
    assert resolve_signal("SIGIOT").number == signal.SIGABRT
    assert resolve_signal(str(signal.SIGABRT)).name == "SIGABRT"
    assert resolve_signal("SIGUNUSED").number == signal.SIGSYS
    assert resolve_signal("SIGINFO").number == signal.SIGPWR


def test_undefined_names():
    res = resolve_signal("SIGEMT")
    assert res.known
    assert res.number is None
    assert res.cells() == ("SIGEMT", "-", "Emulator trap")

    libc = resolve_signal("SIGLOST", LibcSignalDescriptions())
    assert libc.description == UNKNOWN_SIGNAL


def test_unknown():
    assert resolve_signal("99").cells() == ("-", "99", UNKNOWN_SIGNAL)
    assert resolve_signal("1", status=True).cells() == ("-", "-127", UNKNOWN_SIGNAL)
    assert resolve_signal("SIGFOO").cells() == ("SIGFOO", "-", UNKNOWN_SIGNAL)
    assert resolve_signal("").cells() == ("", "-", UNKNOWN_SIGNAL)


def test_libc_descriptions():
    res = resolve_signal("SIGINT", LibcSignalDescriptions())
    assert res.description == signal.strsignal(signal.SIGINT)


def test_list():
    listing = list_signals()
    assert len(listing) == len(SIGNAL_TABLE)
    assert [r.name for r in listing] == [e.name for e in SIGNAL_TABLE]
