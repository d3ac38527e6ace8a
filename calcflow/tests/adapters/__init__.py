"""Tests for calcflow adapter implementations."""
