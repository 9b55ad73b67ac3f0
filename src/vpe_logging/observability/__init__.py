"""Observability – leveled multi-sink logging for pipeline clients."""
