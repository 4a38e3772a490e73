"""Accounts dashboard package."""
