"""
HTTP API for seed derivation and reproducible streams.
"""
