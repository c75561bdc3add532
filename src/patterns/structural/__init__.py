"""Structural patterns: decorator, facade and protection proxy."""
