"""Command line interface for the dealership application."""
