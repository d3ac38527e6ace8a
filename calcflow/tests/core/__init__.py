"""Unit tests for calcflow core domain logic."""
