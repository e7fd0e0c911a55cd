"""Creational patterns: Factory Method variants and Singleton."""
