"""Unit tests for add-to-project."""
