"""Test suite for recency_cache."""
