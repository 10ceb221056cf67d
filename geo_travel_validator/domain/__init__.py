"""Pure feasibility logic: validation, distance and evaluation."""
