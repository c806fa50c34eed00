"""Qt integration for board sessions."""

from boardwatch.ui.qt_bridge import SessionBridge

__all__ = ["SessionBridge"]
