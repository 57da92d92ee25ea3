"""Chain index construction and aggregation.

This module turns filtered transactions into a re-based index history.
It derives per-asset ratios and the time-adjusted market index.
"""
