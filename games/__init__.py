"""
Rockfall games.
"""
