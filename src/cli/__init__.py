"""Command line interface for TAMI."""
