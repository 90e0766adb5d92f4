"""Adds issues and pull requests to GitHub Projects (v2) boards."""
