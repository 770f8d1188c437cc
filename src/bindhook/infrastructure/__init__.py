"""Infrastructure layer: tree-sitter parsing and file access."""
