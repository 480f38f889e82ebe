"""Tests for the heatmap package."""
