"""
Services Package for the Alpha WebM converter.

- **Overwrite Guard (`OverwriteGuard`):**
  Checks every output before any work starts and asks the operator before an
  existing output is deleted. One refusal aborts the batch.

- **Encoder (`encode`, `clean`):**
  Builds and runs the FFmpeg and mkclean commands for a job and raises a
  `SubprocessFailureException` when either exits with a failure status.

- **Progress (`ProgressReporter`):**
  Renders a per-file spinner line with the job's position and phase.
"""
