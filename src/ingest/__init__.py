"""Transaction ingest and pipeline orchestration.

This module reads transaction sources and runs the TAMI stages.
It hands typed results to the SDK and CLI layers.
"""
