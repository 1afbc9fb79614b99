"""
Configuration Package for the Alpha WebM converter.

This package centralizes the static settings of the application:
- Common settings such as the logging format and the optional user config file
  pointing at the FFmpeg and mkclean installations.
- The fixed encoding and cleaning parameters handed to the external tools.
"""
