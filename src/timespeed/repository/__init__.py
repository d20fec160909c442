"""Persistence adapters."""

from timespeed.repository.json_store import JsonConfigRepository

__all__ = ["JsonConfigRepository"]
