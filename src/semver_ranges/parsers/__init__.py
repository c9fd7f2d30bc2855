"""Text grammars for versions, ranges and their identifier sequences."""
