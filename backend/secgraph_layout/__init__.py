"""Security graph layout backend: decode, sanitize and lay out directed graphs."""
