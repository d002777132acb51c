"""Route model, transport costs and exceptions."""
