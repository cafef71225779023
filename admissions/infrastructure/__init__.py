"""Infrastructure: flow document loading and in-memory persistence."""
