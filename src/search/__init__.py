"""Predicate search layer.

This module scans ordered mappings with caller predicates and stops at
the first decisive result. It powers the SDK facade and the CLI.
"""
