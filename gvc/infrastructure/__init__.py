"""Infrastructure: record store implementations (Firestore REST, in-memory)."""
