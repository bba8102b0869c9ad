"""Google Docs and Sheets tools."""
