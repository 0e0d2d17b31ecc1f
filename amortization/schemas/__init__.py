"""Data contracts for engine output."""
