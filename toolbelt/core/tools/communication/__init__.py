"""Messaging and speech tools."""
