"""Integration tests for components working together as a system.

Coverage:
    - FastAPI host with real HTTP requests
    - Conversation controller driving the real Gemini client

Live Gemini tests require GEMINI_API_KEY and are skipped without it.
"""
