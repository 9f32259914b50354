"""Core domain package for contactscope.

Core contains the contact model, field extraction, and predicate matching
without any storage or terminal-specific code, keeping the filtering logic
portable.
"""
