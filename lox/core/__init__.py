"""The language itself: tokens, scanner, syntax tree, parser, environments and evaluator."""
