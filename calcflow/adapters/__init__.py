"""External adapters for calcflow.

This package provides implementations of the core port interfaces.

Adapter Organization:

- clock/: Adapters for time and suspension (system time, virtual time)
"""
