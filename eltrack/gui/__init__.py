"""Qt bridges between the ride log and a PyQt6 presentation layer."""
