"""HTTP contract tests."""
