"""Commands - operations that change state."""
