"""Routing — compiled route table with segment-by-segment matching.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""
