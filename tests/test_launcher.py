import subprocess

import pytest

from gh_changelog import launcher
from gh_changelog.errors import EntryLookupError, LaunchError


@pytest.fixture
def entries(make_entry):
    return [
        make_entry(title="Newest", link="https://github.blog/changelog/newest"),
        make_entry(title="No link"),
        make_entry(title="Oldest", link="https://github.blog/changelog/oldest"),
    ]


@pytest.mark.parametrize("token", ["#2", "2"])
def test_resolve_entry_accepts_optional_marker(entries, token):
    index, entry = launcher.resolve_entry(entries, token)

    assert index == 2
    assert entry.title == "Oldest"


def test_resolve_entry_rejects_non_integer(entries):
    with pytest.raises(EntryLookupError, match="Invalid ID: abc"):
        launcher.resolve_entry(entries, "#abc")


@pytest.mark.parametrize("token", ["3", "-1", "#99"])
def test_resolve_entry_rejects_out_of_range(entries, token):
    with pytest.raises(EntryLookupError, match=r"out of range \(0-2\)"):
        launcher.resolve_entry(entries, token)


def test_resolve_entry_rejects_empty_listing():
    with pytest.raises(EntryLookupError, match="No entries available"):
        launcher.resolve_entry([], "0")


def test_resolve_entry_requires_link(entries):
    with pytest.raises(EntryLookupError, match="No link available for item #1"):
        launcher.resolve_entry(entries, "#1")


def test_entry_lookup_error_is_a_lookup_error(entries):
    with pytest.raises(LookupError):
        launcher.resolve_entry(entries, "7")


def test_open_entry_hands_link_to_opener(entries):
    opened = []

    entry = launcher.open_entry(entries, "#0", opener=opened.append)

    assert entry.title == "Newest"
    assert opened == ["https://github.blog/changelog/newest"]


def test_open_entry_does_not_call_opener_for_bad_index(entries):
    opened = []

    with pytest.raises(EntryLookupError):
        launcher.open_entry(entries, "#3", opener=opened.append)

    assert opened == []


def test_open_entry_defaults_to_launch_url(monkeypatch, entries):
    opened = []
    monkeypatch.setattr(launcher, "launch_url", opened.append)

    launcher.open_entry(entries, "2")

    assert opened == ["https://github.blog/changelog/oldest"]


@pytest.mark.parametrize(
    "platform, expected",
    [
        ("darwin", ["open", "https://x.test"]),
        ("win32", ["cmd", "/c", "start", "", "https://x.test"]),
        ("linux", ["xdg-open", "https://x.test"]),
        ("freebsd13", ["xdg-open", "https://x.test"]),
    ],
)
def test_browser_command_per_platform(platform, expected):
    assert launcher.browser_command("https://x.test", platform=platform) == expected


def test_launch_url_starts_command_without_waiting(monkeypatch):
    started = []

    class FakePopen:
        def __init__(self, command, **kwargs):
            started.append((command, kwargs))

        def wait(self):  # pragma: no cover - must not be called
            raise AssertionError("launch_url should not wait")

    monkeypatch.setattr(launcher.subprocess, "Popen", FakePopen)
    monkeypatch.setattr(launcher.sys, "platform", "linux")

    launcher.launch_url("https://x.test")

    assert started[0][0] == ["xdg-open", "https://x.test"]
    assert started[0][1]["stdout"] is subprocess.DEVNULL


def test_launch_url_wraps_os_errors(monkeypatch):
    def fail(*_args, **_kwargs):
        raise FileNotFoundError("xdg-open not found")

    monkeypatch.setattr(launcher.subprocess, "Popen", fail)

    with pytest.raises(LaunchError, match="Failed to open browser"):
        launcher.launch_url("https://x.test")
