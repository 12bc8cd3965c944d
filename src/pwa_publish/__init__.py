"""PWA package publishing — build orchestration against the packaging service."""
