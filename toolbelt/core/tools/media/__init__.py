"""Media upload, speech and transcription tools."""
