"""Calculation dispatch and caller-side state."""
