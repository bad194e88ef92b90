"""Domain models and entities.

Pure data structures (Pydantic v2). The domain knows nothing about the CLI
or the filesystem.
"""
