"""
reckon core: errors, AST, expression language, and pipeline.
"""
