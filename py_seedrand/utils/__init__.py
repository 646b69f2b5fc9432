"""
Shared generator and helpers built on top of it.
"""
