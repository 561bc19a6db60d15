"""Gateways wrapping external processes behind testable interfaces."""
