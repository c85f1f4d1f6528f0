"""Poise damage and hyperarmor figures for weapon movesets."""

__version__ = "0.1.0"
