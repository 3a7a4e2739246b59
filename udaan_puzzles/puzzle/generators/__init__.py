# Per-kind generation functions, referenced from the puzzle catalog
