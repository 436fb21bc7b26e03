"""Content sources, validators, loader and the well-known document registry."""
