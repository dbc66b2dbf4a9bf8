"""Services: application layer between routes and repositories."""
