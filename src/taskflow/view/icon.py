# SPDX-License-Identifier: MIT

DEFAULT_ICON = "•"

ICONS: dict[str, str] = {
    "AlertCircle": "!",
    "AlertTriangle": "⚠",
    "Check": "✓",
    "CheckCheck": "✔✔",
    "CheckCircle": "✔",
    "ChevronRight": "›",
    "ClipboardList": "📋",
    "Clock": "◷",
    "Flag": "⚑",
    "Inbox": "📥",
    "Layers": "≡",
    "ListChecks": "☑",
    "Loader": "…",
    "LogOut": "⏻",
    "Moon": "☾",
    "Pencil": "✎",
    "Plus": "+",
    "Save": "💾",
    "Sun": "☀",
    "Trash2": "🗑",
    "User": "👤",
    "X": "✗",
}


def get_icon(name: str) -> str:
    """Return the glyph registered for an icon name, or a neutral bullet."""
    return ICONS.get(name, DEFAULT_ICON)
