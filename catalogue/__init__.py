"""
Catalogue content pipeline.

Resolves server-authored catalogue documents into ordered content blocks and
rewrites semantic references embedded in their markdown.
"""
