"""Presentation layer: lifecycle hook and command line."""
