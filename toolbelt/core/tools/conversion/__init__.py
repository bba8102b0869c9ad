"""Unit conversion tools."""
