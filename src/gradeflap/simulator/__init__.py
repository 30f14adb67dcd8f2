"""Desktop pygame shell for Grade Flap."""
