# tests/test_theme.py

from __future__ import annotations

from sage_tasks.core.theme import Theme, ThemePreference

from .fakes import FakeKVStore


def test_load_uses_default_and_persists_it() -> None:
    kv = FakeKVStore()
    pref = ThemePreference(kv, default="dark")

    assert pref.load() is Theme.DARK
    assert kv.data["sageTheme"] == "dark"


def test_load_prefers_stored_value() -> None:
    kv = FakeKVStore({"sageTheme": "dark"})
    pref = ThemePreference(kv, default="light")

    assert pref.load() is Theme.DARK
    assert pref.is_dark


def test_invalid_stored_value_falls_back() -> None:
    kv = FakeKVStore({"sageTheme": "purple"})
    assert ThemePreference(kv).load() is Theme.LIGHT


def test_toggle_persists_and_ignores_write_failures() -> None:
    kv = FakeKVStore()
    pref = ThemePreference(kv, key="theme")
    pref.load()

    assert pref.toggle() is Theme.DARK
    assert kv.data["theme"] == "dark"

    kv.fail_writes = True
    assert pref.toggle() is Theme.LIGHT
    assert pref.current is Theme.LIGHT
    assert kv.data["theme"] == "dark"


def test_read_failure_falls_back_to_default() -> None:
    kv = FakeKVStore()
    kv.fail_reads = True
    assert ThemePreference(kv, default="dark").load() is Theme.DARK
