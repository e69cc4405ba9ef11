"""gwt - switch between git worktrees kept as sibling directories."""
