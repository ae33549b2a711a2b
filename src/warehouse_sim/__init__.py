"""Batch time and cost estimation for a resource-constrained warehouse."""
