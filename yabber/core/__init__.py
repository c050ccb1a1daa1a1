"""Core path, codec, cipher and profile logic for yabber."""
