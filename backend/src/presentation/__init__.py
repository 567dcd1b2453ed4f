"""Presentation layer - HTTP routes and schemas."""
