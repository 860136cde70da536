"""Host adapters binding the engine to concrete text widgets."""
