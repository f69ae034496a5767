"""LLM providers for the AI analysis mode."""
