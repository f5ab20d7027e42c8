"""
Grid storage, coordinates and terrain payloads.
"""
