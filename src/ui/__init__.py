"""NiceGUI interface - thin visualization layer for the tutor conversation.

Responsibilities:
    - Chat transcript display with typeset math
    - Image picker with preview for photographed problems
    - "Why?" and "next step" nudge buttons
    - Thinking indicator while the tutor is answering

Contains no business logic. Reads and drives a ConversationController.
"""
