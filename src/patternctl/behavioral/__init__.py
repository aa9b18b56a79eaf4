"""Behavioral patterns: chain of responsibility."""
