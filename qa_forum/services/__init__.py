"""
services/ - Service Layer
=========================
Composes repositories into the Forum handle and multi-step workflows.
"""
