"""HTTP lookup service."""
