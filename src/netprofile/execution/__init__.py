"""Execution pipeline for netprofile."""

from .runner import ProfileRunner

__all__ = ["ProfileRunner"]
