"""Shared building blocks: errors, logging, constants and record schemas."""
