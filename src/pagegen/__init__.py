"""Post-processing for compiled page templates: component imports and index files."""
