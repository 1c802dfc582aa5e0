"""
Command-line interface for sleepcycle.
"""
