"""Tests for add-to-project."""
