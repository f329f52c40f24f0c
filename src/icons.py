"""Icon names used in page content, mapped to terminal glyphs.

Content stores icon names as plain strings (``"Rocket"``, ``"Shield"``).
Renderers look them up here; unknown or empty names get the fallback.
"""

from __future__ import annotations

FALLBACK_ICON = "•"

ICONS: dict[str, str] = {
    "Activity": "📈",
    "Atom": "⚛",
    "Bot": "🤖",
    "Box": "📦",
    "Brain": "🧠",
    "Briefcase": "💼",
    "Clock": "🕒",
    "Cloud": "☁",
    "Code": "⌨",
    "Cpu": "🖥",
    "Database": "🗄",
    "DollarSign": "$",
    "FileText": "📄",
    "Github": "🐙",
    "Globe": "🌐",
    "Grid": "▦",
    "History": "🕘",
    "Home": "🏠",
    "Image": "🖼",
    "Instagram": "📷",
    "Layers": "🗂",
    "Layout": "▤",
    "LifeBuoy": "🛟",
    "Link": "🔗",
    "Linkedin": "in",
    "Mail": "✉",
    "MessageSquare": "💬",
    "Newspaper": "📰",
    "Palette": "🎨",
    "PenTool": "✒",
    "Rocket": "🚀",
    "Search": "🔍",
    "Server": "🖧",
    "Settings": "⚙",
    "Shield": "🛡",
    "ShieldAlert": "⚠",
    "ShoppingBag": "🛍",
    "ShoppingCart": "🛒",
    "Smartphone": "📱",
    "Terminal": "▶",
    "TrendingUp": "📈",
    "Twitter": "🐦",
    "Users": "👥",
    "Wrench": "🔧",
    "Zap": "⚡",
}


def resolve_icon(name: str | None, fallback: str = FALLBACK_ICON) -> str:
    """Return the glyph for an icon name, or ``fallback`` if it is unknown."""
    if not name:
        return fallback
    return ICONS.get(name, fallback)
