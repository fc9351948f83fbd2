"""Framework integrations for neo-pagination."""
