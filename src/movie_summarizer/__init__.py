"""
Movie Summarizer: turn a rough movie title into a formatted summary file.
"""
__version__ = "0.1.0"
