"""Shared utilities for paths and CLI output."""
