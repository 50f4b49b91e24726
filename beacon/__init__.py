"""Passive listener for binary user-update broadcasts."""
