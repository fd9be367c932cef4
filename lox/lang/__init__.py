"""Everything around the core pipeline: error handling, sessions, the interactive shell and the AST printer."""
