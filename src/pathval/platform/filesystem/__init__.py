"""Thin delegations from PathValue to host OS filesystem calls."""
