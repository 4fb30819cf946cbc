"""
LLM prompt templates, grouped by feature.
"""
