"""Core: domain, services, configuration. No CLI or I/O details here."""
