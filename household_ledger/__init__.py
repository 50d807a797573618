"""Household expense tracking: people, categories, transactions and reports."""
