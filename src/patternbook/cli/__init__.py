"""Command line interface for running and browsing the demos."""
