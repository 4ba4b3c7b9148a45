"""Schema validation for generated reports."""
