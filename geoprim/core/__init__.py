"""Internal implementation package for geoprim.

Public symbols are re-exported from ``geoprim``; modules here may change.
"""
