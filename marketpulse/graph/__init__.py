"""LangGraph stage graph for the competitor intelligence pipeline."""
