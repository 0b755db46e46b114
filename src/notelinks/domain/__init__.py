"""Domain layer — URL rules, frontmatter splitting, scanning, dedupe.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""
