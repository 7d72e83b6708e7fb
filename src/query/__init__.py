"""Task query engine.

This package filters, searches, sorts, and pages task snapshots.
Every stage is a pure function of its inputs.
"""
