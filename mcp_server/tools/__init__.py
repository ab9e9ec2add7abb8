"""Tool implementations. Each returns Markdown text; errors are rendered, never raised."""
