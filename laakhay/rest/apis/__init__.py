"""API catalogs shipped with the client."""
