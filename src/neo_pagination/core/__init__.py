"""Core building blocks shared across neo-pagination."""
