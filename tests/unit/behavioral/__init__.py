"""Behavioral pattern tests package."""
