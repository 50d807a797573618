"""Adapters connecting the household ledger to the outside world."""
