"""QSS stylesheet and palette for SimTimer."""

from __future__ import annotations

from ..timer.engine import TimerState


PALETTE: dict[str, str] = {
    "bg":           "#F3F4F6",
    "header_bg":    "#0F172A",
    "header_text":  "#FFFFFF",
    "header_muted": "#6B7280",
    "surface":      "#FFFFFF",
    "text":         "#111827",
    "text_muted":   "#4B5563",
    "border":       "#D1D5DB",
    "start":        "#3B82F6",
    "start_hover":  "#2563EB",
    "start_off":    "#93C5FD",
    "stop":         "#EAB308",
    "stop_hover":   "#CA8A04",
    "stop_off":     "#FDE047",
    "reset":        "#EF4444",
    "reset_hover":  "#DC2626",
    "alert":        "#DC2626",
}

# Countdown label colour per engine state.
STATE_COLORS: dict[TimerState, str] = {
    TimerState.IDLE:     PALETTE["text"],
    TimerState.COUNTING: PALETTE["text"],
    TimerState.PAUSED:   PALETTE["alert"],
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QMainWindow, QWidget#central {{
        background: {p['bg']};
    }}
    QWidget {{
        color: {p['text']};
        font-size: 14px;
    }}

    /* ── header ─────────────────────────────────────────── */
    QFrame#header {{
        background: {p['header_bg']};
        border-bottom: 1px solid {p['border']};
    }}
    QLabel#headerTitle {{
        color: {p['header_text']};
        font-size: 22px;
        font-weight: bold;
    }}
    QLabel#navLink {{
        color: {p['header_text']};
        padding: 0 6px;
    }}
    QLabel#navLink:hover {{
        color: {p['header_muted']};
    }}

    /* ── timer card ─────────────────────────────────────── */
    QLabel#timerTitle {{
        font-size: 26px;
        font-weight: bold;
    }}
    QSpinBox {{
        background: {p['surface']};
        border: 1px solid {p['border']};
        border-radius: 4px;
        padding: 6px;
        min-width: 52px;
    }}
    QLabel#countdown {{
        font-family: "Menlo", "Consolas", monospace;
        font-size: 48px;
    }}
    QLabel#sessionRemaining {{
        color: {p['text_muted']};
    }}
    QLabel#pauseBanner {{
        color: {p['alert']};
    }}

    /* ── buttons ────────────────────────────────────────── */
    QPushButton {{
        color: white;
        border: none;
        border-radius: 4px;
        padding: 8px 16px;
    }}
    QPushButton#startButton {{ background: {p['start']}; }}
    QPushButton#startButton:hover {{ background: {p['start_hover']}; }}
    QPushButton#startButton:disabled {{ background: {p['start_off']}; }}
    QPushButton#stopButton {{ background: {p['stop']}; }}
    QPushButton#stopButton:hover {{ background: {p['stop_hover']}; }}
    QPushButton#stopButton:disabled {{ background: {p['stop_off']}; }}
    QPushButton#resetButton {{ background: {p['reset']}; }}
    QPushButton#resetButton:hover {{ background: {p['reset_hover']}; }}
    """
