"""Adapters: side effects (files, serialization) kept out of the Core."""
