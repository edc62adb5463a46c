"""Small side-effect free helpers shared by adapters and services."""
