import sys
import os
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PySide6.QtCore import QSettings

from plain_notes.settings import DEFAULT_NOTES_DIR, SettingsKeys, get_int, resolve_notes_dir
from plain_notes.ui.theme import MAX_FONT_SIZE, MIN_FONT_SIZE, UiConfig, build_stylesheet, normalize_theme


def test_notes_dir_precedence(tmp_path):
    cli = tmp_path / "cli"
    assert resolve_notes_dir(cli, "/stored") == cli
    assert resolve_notes_dir(None, str(tmp_path / "stored")) == tmp_path / "stored"
    assert resolve_notes_dir(None, "  ") == DEFAULT_NOTES_DIR
    assert resolve_notes_dir(None, None) == DEFAULT_NOTES_DIR


def test_notes_dir_expands_user():
    assert resolve_notes_dir(Path("~/n"), None) == Path.home() / "n"


def test_normalize_theme():
    assert normalize_theme("DARK ") == "dark"
    assert normalize_theme("solarized") == "light"
    assert normalize_theme(None) == "light"


def test_ui_config_is_immutable_and_switches_theme():
    base = UiConfig()
    dark = base.with_theme("dark")
    assert base.theme == "light"
    assert dark.theme == "dark"
    assert dark.palette.window != base.palette.window


def test_stylesheet_uses_palette_and_font():
    cfg = UiConfig(theme="dark", font_family="Fira Code", font_size=13)
    css = build_stylesheet(cfg)
    assert cfg.palette.base in css
    assert '"Fira Code"' in css
    assert "13pt" in css


def test_font_size_is_clamped():
    cfg = UiConfig(font_size=11)
    assert cfg.with_font_size(12).font_size == 12
    assert cfg.with_font_size(1).font_size == MIN_FONT_SIZE
    assert cfg.with_font_size(500).font_size == MAX_FONT_SIZE
    assert cfg.font_size == 11


def test_int_setting_falls_back_on_garbage(tmp_path):
    settings = QSettings(str(tmp_path / "settings.ini"), QSettings.IniFormat)
    settings.setValue(SettingsKeys.UI_FONT_SIZE, 14)
    settings.setValue(SettingsKeys.UI_THEME, "dark")

    assert get_int(settings, SettingsKeys.UI_FONT_SIZE, 11) == 14
    assert get_int(settings, SettingsKeys.UI_THEME, 11) == 11
    assert get_int(settings, "missing/key", 9) == 9
