"""Pure transformations between request models, table rows and responses."""
