"""Command line interface for unionvote."""
