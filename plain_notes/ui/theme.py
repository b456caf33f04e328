from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Palette:
    window: str
    base: str
    text: str
    muted: str
    accent: str
    border: str


PALETTES = {
    "light": Palette(
        window="#f3f3f3", base="#ffffff", text="#1e1e1e",
        muted="#6b6b6b", accent="#2f6fdb", border="#c8c8c8",
    ),
    "dark": Palette(
        window="#202124", base="#2b2c2f", text="#e8e8e8",
        muted="#9a9a9a", accent="#6ea8ff", border="#45464a",
    ),
}


def normalize_theme(name: str | None) -> str:
    name = (name or "").strip().lower()
    return name if name in PALETTES else "light"


MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 48


def clamp_font_size(size: int) -> int:
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, int(size)))


@dataclass(frozen=True)
class UiConfig:
    """Presentation settings, handed to the window when it is built."""
    theme: str = "light"
    font_family: str = "Monospace"
    font_size: int = 11
    window_width: int = 800
    window_height: int = 600

    def with_theme(self, name: str) -> "UiConfig":
        return replace(self, theme=normalize_theme(name))

    def with_font_size(self, size: int) -> "UiConfig":
        return replace(self, font_size=clamp_font_size(size))

    @property
    def palette(self) -> Palette:
        return PALETTES[normalize_theme(self.theme)]


def build_stylesheet(config: UiConfig) -> str:
    p = config.palette
    return f"""
QWidget {{
    background-color: {p.window};
    color: {p.text};
}}
QLineEdit, QTextEdit, QPlainTextEdit, QListWidget {{
    background-color: {p.base};
    color: {p.text};
    border: 1px solid {p.border};
    border-radius: 3px;
    selection-background-color: {p.accent};
}}
QPlainTextEdit {{
    font-family: "{config.font_family}";
    font-size: {int(config.font_size)}pt;
}}
QPushButton {{
    background-color: {p.base};
    border: 1px solid {p.border};
    border-radius: 3px;
    padding: 4px 12px;
}}
QPushButton:hover {{
    border-color: {p.accent};
}}
QLabel#dateLabel {{
    color: {p.muted};
}}
"""
