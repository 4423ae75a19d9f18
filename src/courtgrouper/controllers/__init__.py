"""Controllers coordinating the engine with a caller's session state."""
