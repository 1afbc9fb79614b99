"""
Alpha WebM batch converter.

Converts video files to VP9 WebM with an alpha channel using FFmpeg and then
rewrites the container with mkclean. Files are handled one at a time in the
order they were given on the command line.
"""

__version__ = "1.0.0"
