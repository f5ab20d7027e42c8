"""
Flask service answering path and range queries over posted grids.
"""
