"""Adapters – transport implementations of the kernel messaging ports."""
