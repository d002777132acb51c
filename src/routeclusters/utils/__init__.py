"""Logging and random source helpers."""
