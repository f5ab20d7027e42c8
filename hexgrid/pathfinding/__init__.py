"""
Searches over a HexGrid: weighted path search and cost-bounded range.
"""
