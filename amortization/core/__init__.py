"""Calculation routines."""
