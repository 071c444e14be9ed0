"""
The ANALYSIS layer turns numeric series into dependency scores and fills the
MODEL's tables with them. It also compares projected variable graphs.
"""
