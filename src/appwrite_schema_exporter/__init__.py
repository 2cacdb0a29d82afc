"""Export an Appwrite schema document into a per-entity directory tree."""
