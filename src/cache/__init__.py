"""Content cache: outcome models and single-flight stores."""
