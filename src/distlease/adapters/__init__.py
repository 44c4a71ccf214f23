"""Adapters – concrete lease stores."""
