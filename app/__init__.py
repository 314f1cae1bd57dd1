"""
Command-line entry point.
"""
