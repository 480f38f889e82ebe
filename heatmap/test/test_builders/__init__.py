"""Tests for the builders module."""
