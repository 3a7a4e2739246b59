# Per-kind move validation, completion and hint functions, referenced from the puzzle catalog
