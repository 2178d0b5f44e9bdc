"""Hosts that drive the editor core from a real terminal."""
