"""GVC dashboard back-end: subject profile aggregation over Firestore."""
