"""HTTP API for Stack Advisor."""
