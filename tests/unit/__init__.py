"""Unit tests for the design pattern demos."""
