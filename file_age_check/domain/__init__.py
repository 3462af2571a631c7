"""Domain layer - Pure file age rules without I/O."""
