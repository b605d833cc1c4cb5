"""
Core functionality for TubeSummarize.

This package contains modules for resolving YouTube metadata, fetching or
synthesizing transcripts, and summarizing them.
"""
