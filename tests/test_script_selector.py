import pytest

from core.domain.models import Manifest, ScriptEntry
from core.services.script_selector import matches_filter, select_scripts


def _names(entries):
    return [entry.name for entry in entries]


def test_select_sorts_by_name():
    manifest = Manifest(scripts={"test": "jest", "build": "tsc", "Lint": "eslint ."})

    entries = select_scripts(manifest)

    # Codepoint order: uppercase sorts before lowercase.
    assert _names(entries) == ["Lint", "build", "test"]
    assert entries[1] == ScriptEntry(name="build", command="tsc")


def test_sort_is_idempotent():
    manifest = Manifest(scripts={"c": "3", "a": "1", "b": "2"})
    entries = select_scripts(manifest)

    resorted = select_scripts(Manifest(scripts={e.name: e.command for e in entries}))

    assert resorted == entries


def test_filter_is_case_insensitive_substring():
    manifest = Manifest(scripts={"build": "x", "rebuild": "y", "test": "z"})

    assert _names(select_scripts(manifest, "bui")) == ["build", "rebuild"]
    assert _names(select_scripts(manifest, "BUI")) == ["build", "rebuild"]


@pytest.mark.parametrize("pattern", [None, ""])
def test_empty_pattern_keeps_everything(pattern):
    manifest = Manifest(scripts={"build": "x", "test": "z"})
    assert _names(select_scripts(manifest, pattern)) == ["build", "test"]


def test_filter_without_matches():
    manifest = Manifest(scripts={"build": "x"})
    assert select_scripts(manifest, "deploy") == []


@pytest.mark.parametrize(
    ("name", "pattern", "expected"),
    [
        ("build:prod", "PROD", True),
        ("Test", "tes", True),
        ("lint", "lints", False),
        ("anything", None, True),
    ],
)
def test_matches_filter(name, pattern, expected):
    assert matches_filter(name, pattern) is expected
