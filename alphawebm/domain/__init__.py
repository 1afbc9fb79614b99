"""
Core domain models of the Alpha WebM converter.

Modules:
    exceptions.py: Custom exception types for the batch gate and the per-file
                   pipeline failures.
    job.py: The `ConversionJob` unit of work with its derived paths and its
            `JobState`.
    media.py: Duration probing of the input file, used for progress display.
"""
