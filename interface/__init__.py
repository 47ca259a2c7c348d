"""New-session dialog that owns the ghost-completing path field."""
