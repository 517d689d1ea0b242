"""
End-to-end tests for sizehandler.

These tests exercise complete workflows: real files on disk, YAML
configuration, custom size sources and locale-specific output.
"""
