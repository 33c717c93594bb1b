"""Unit tests for individual components in isolation.

Ensures fast execution with no network access.

Coverage:
    - models/: Pydantic validation of messages and parts
    - tutor/: Settings, wire mapping, and the SDK call (mocked)
    - conversation/: Send gating, state transitions, failure fallback
    - rendering/: Delimiter scanning and HTML output

Uses mocks for the Gemini SDK and a recording fake tutor.
"""
