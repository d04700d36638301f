"""Unit tests for domain building blocks."""
