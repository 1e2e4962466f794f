"""Test suite for tableflow."""
