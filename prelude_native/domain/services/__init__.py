"""Domain services: attribute coercion, typed node construction and record counts."""
