"""
Utilities Package for the Alpha WebM converter.

Modules:
    - process_utils.py: Runs external commands and streams their stderr.
    - path_utils.py: Platform-appropriate quoting of file arguments.
    - format_utils.py: Human-readable elapsed times.
"""
