"""Cross-cutting infrastructure shared by the library and the CLI."""
