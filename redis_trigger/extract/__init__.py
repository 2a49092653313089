"""
Extract Layer - Pure I/O from the local filesystem

This layer reads the source document with no knowledge of Redis.
- Returns raw bytes, never re-serialised
- Validates JSON before anything downstream runs
"""
