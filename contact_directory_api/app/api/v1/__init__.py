"""
Version 1 of the API.

This subpackage bundles the contact directory endpoints.  Breaking
changes should be introduced in new version subpackages (e.g. ``v2``).
"""
