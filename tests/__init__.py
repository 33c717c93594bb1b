"""Test package for Socratica.

Unit tests for isolated logic and integration tests for workflows.

Structure:
    - unit/: Schemas, settings, tutor client, controller, math renderer
    - integration/: HTTP host and live Gemini calls

Leverages pytest with pytest-check for soft assertions.
"""
