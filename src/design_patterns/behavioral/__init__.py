"""Behavioral patterns: Strategy and Template Method."""
