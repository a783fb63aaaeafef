"""Calendar and ordering core of a team scheduling board."""
