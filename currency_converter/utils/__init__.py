"""Shared helpers for :mod:`currency_converter`."""
