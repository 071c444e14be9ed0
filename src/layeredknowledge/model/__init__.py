"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the numeric scoring or of plotting.
It deals with Layers, Relations, Dependency Tables and their projection.
"""
