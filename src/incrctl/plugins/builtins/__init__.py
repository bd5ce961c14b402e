"""Plugins shipped with incrctl."""
