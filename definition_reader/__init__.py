"""
Definition reader core package.

This package currently focuses on the parsing subsystem. It exposes
dataclasses for parsed definitions, a pluggable document tree interface,
a cancellation token driven by the request lifecycle, and a pipeline that
extracts pronunciation, part-of-speech sections and definition lists from
a single Wiktionary page.
"""

__version__ = "0.1.0"
