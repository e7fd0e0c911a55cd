"""Creational pattern tests package.

Tests for the Factory Method variants and the Singleton demos.
"""
