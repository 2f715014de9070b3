"""Reusable patterns for building rule-driven shop verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: threshold rules engines, in-memory repositories, and
domain configuration.
"""
