"""Ambient configuration: settings, logging and monitoring."""
