"""
Data sources.

Read-only lookups that project one remote record onto a local result.
"""
