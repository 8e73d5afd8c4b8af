"""Core domain package for linescope.

Core contains line filtering, configuration rules and run orchestration
without any filesystem or console code, keeping the search logic portable.
"""
