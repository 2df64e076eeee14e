"""Unit tests for the xenon_e2e support library."""
