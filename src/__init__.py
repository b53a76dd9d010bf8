"""Spending metrics dashboard package."""
