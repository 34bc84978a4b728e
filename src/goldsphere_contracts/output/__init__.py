"""Terminal rendering for gsctl: Rich for humans, JSON for machines."""
