"""Toolkit-independent pieces: options, sessions, the handoff and the bridge."""
