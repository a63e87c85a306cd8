"""Gateways wrapping the external collaborators: git, gh, the LLM API and the editor."""
