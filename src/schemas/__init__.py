"""Pydantic models for each content kind."""
