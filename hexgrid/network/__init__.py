"""
HTTP client for the grid query service.
"""
