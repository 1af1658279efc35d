"""Rundown CLI."""
