"""Kernel – error hierarchy and messaging primitives shared by every layer."""
