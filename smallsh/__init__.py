"""smallsh - a small interactive shell with foreground/background job control."""
