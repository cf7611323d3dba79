"""Network surfaces exposing the registered date tools."""
