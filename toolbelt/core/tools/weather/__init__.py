"""Weather, sunrise/sunset and prayer timing tools."""
