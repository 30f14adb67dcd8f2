"""Grade Flap - a flappy arcade game with letter-grade pickups and a skin shop."""

__version__ = "0.1.0"
