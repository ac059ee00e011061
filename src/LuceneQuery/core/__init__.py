"""Pure query-building primitives: validation, escaping, builders and combinators."""
