"""
sleepcycle - Suggest bedtimes and wake times aligned to whole sleep cycles.
"""

__version__ = "0.1.0"
