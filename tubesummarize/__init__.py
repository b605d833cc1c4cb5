"""
TubeSummarize.

This application extracts YouTube video transcripts, falls back to a
synthetic transcript when captions are unavailable, and generates
summaries using LLM models.
"""

from tubesummarize.config import config

__version__ = config.APP_VERSION
