"""Tools that load web pages."""
