"""
The VIEW layer renders MODEL objects with matplotlib. Nothing in MODEL or
ANALYSIS imports from here.
"""
