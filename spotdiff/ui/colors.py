"""Theme colors and color utilities for the UI."""

from spotdiff.core.session import GameMode


class GameColors:
    """Light theme palette for the home, journey and game screens."""

    BG_TOP = "#ede7f6"
    BG_BOTTOM = "#e0f2f1"

    PRIMARY = "#5e35b1"
    PRIMARY_LIGHT = "#9162e4"
    ACCENT = "#26a69a"
    ACCENT_TEXT = "#ffffff"

    CELL_BG = "#ffffff"
    CELL_BORDER = "#d1c4e9"
    CELL_HOVER = "#b39ddb"
    ERROR_FLASH = "#ef5350"

    NODE_COMPLETED = "#43a047"
    NODE_AVAILABLE = "#1e88e5"
    NODE_LOCKED = "#ffffff"
    NODE_LOCKED_BORDER = "#9e9e9e"

    TEXT_PRIMARY = "#212121"
    TEXT_MUTED = "#757575"

    ZEN = "#81c784"
    NORMAL = "#64b5f6"
    TIME_CHALLENGE = "#ff8a65"


def mode_color(mode: GameMode) -> str:
    """Badge color for a rule mode."""
    return {
        GameMode.ZEN: GameColors.ZEN,
        GameMode.NORMAL: GameColors.NORMAL,
        GameMode.TIME_CHALLENGE: GameColors.TIME_CHALLENGE,
    }[mode]


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b. Malformed input returns a."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"
