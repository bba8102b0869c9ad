"""Location tools: resolver, IP lookup, phone numbers, geocoding and local time."""
