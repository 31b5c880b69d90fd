"""The lexer, parser, and canonical-form pipeline."""
