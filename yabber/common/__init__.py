"""Shared helpers (errors, constants, logging, settings) for yabber."""
