"""
Stylesheet for the idle-monitor window. The countdown pill takes its colour
from the display severity; buttons share one rule template.
"""

from __future__ import annotations

from typing import Dict, Literal

FONT = "Segoe UI, -apple-system, BlinkMacSystemFont, sans-serif"

ACCENT = "#007AFF"

# Countdown severity -> pill colour
SEVERITY_COLORS: Dict[str, str] = {
    "normal": "#34C759",
    "warning": "#FF9500",
    "error": "#FF3B30",
    "paused": "#8E8E93",
}

PALETTES = {
    "light": {
        "window": "#F5F5F7",
        "card": "#FFFFFF",
        "text": "#000000",
        "muted": "#6E6E73",
        "border": "#E5E5EA",
    },
    "dark": {
        "window": "#000000",
        "card": "#1C1C1E",
        "text": "#FFFFFF",
        "muted": "#98989D",
        "border": "#38383A",
    },
}

ThemeMode = Literal["light", "dark"]


def pill_object_name(severity: str, monitoring: bool) -> str:
    if not monitoring:
        return "StatusPillPaused"
    return {
        "warning": "StatusPillWarning",
        "error": "StatusPillError",
    }.get(severity, "StatusPillNormal")


def _rgba(hex_color: str, alpha: float) -> str:
    hex_color = hex_color.lstrip("#")
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


class Theme:
    def __init__(self, mode: ThemeMode = "dark"):
        self.mode = mode
        self.colors = PALETTES[mode]

    def get_stylesheet(self) -> str:
        c = self.colors
        return "\n".join(
            [
                f"QMainWindow {{ background-color: {c['window']}; color: {c['text']}; }}",
                f"QLabel, QCheckBox {{ font-family: {FONT}; font-size: 15px; color: {c['text']}; }}",
                f"QLabel#TitleLabel {{ font-size: 28px; font-weight: 700; }}",
                f"QLabel#SectionLabel {{ font-size: 17px; font-weight: 600; }}",
                f"QLabel#SubtitleLabel, QLabel#HintLabel {{ font-size: 13px; color: {c['muted']}; }}",
                f"QFrame#Card {{ background-color: {c['card']}; border: 1px solid {c['border']}; border-radius: 16px; }}",
                f"QDoubleSpinBox, QComboBox {{ background-color: {c['card']}; color: {c['text']};"
                f" border: 1px solid {c['border']}; border-radius: 8px; padding: 4px 8px; min-height: 32px; }}",
                f"QListWidget {{ background: transparent; border: none; color: {c['text']}; font-size: 13px; }}",
                self._button("PrimaryButton", ACCENT, "#FFFFFF"),
                self._button("SecondaryButton", c["card"], ACCENT, c["border"]),
                self._button("DangerButton", SEVERITY_COLORS["error"], "#FFFFFF"),
                *(self._pill(severity) for severity in SEVERITY_COLORS),
            ]
        )

    def _button(self, name: str, background: str, foreground: str, border: str = "none") -> str:
        border_rule = "none" if border == "none" else f"1px solid {border}"
        return (
            f"QPushButton#{name} {{ background-color: {background}; color: {foreground};"
            f" border: {border_rule}; border-radius: 20px; padding: 8px 24px;"
            f" font-family: {FONT}; font-size: 15px; font-weight: 600; min-height: 36px; }}\n"
            f"QPushButton#{name}:disabled {{ background-color: {self.colors['border']};"
            f" color: {self.colors['muted']}; }}"
        )

    def _pill(self, severity: str) -> str:
        color = SEVERITY_COLORS[severity]
        return (
            f"QLabel#StatusPill{severity.capitalize()} {{ background-color: {_rgba(color, 0.15)};"
            f" color: {color}; border-radius: 12px; padding: 4px 12px; font-size: 40px; font-weight: 600; }}"
        )
