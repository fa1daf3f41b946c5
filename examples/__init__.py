"""Runnable examples for auid."""
